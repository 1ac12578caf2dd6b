"""Tests for the demo data seeder."""

from datetime import date

import pytest

from app.models import Client, Developer, Engagement, User
from app.scripts.seed_demo_data import seed_demo_data


@pytest.mark.asyncio
async def test_seed_skipped_when_users_exist(mock_db_session, test_settings):
    mock_db_session.scalar.return_value = 1

    assert await seed_demo_data(mock_db_session, test_settings) is False
    mock_db_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_seed_inserts_demo_records(mock_db_session, test_settings):
    mock_db_session.scalar.return_value = 0
    test_settings.init_admin_password = "demo-password"

    assert await seed_demo_data(mock_db_session, test_settings) is True

    added = [call.args[0] for call in mock_db_session.add.call_args_list]
    for call in mock_db_session.add_all.call_args_list:
        added.extend(call.args[0])

    [admin] = [obj for obj in added if isinstance(obj, User)]
    assert admin.email == "admin@hr.com"
    assert admin.role == "admin"

    assert {d.name for d in added if isinstance(d, Developer)} == {"Alice Johnson", "Bob Smith"}
    assert {c.name for c in added if isinstance(c, Client)} == {"Acme Corp", "TechStart Inc"}

    engagements = {e.id: e for e in added if isinstance(e, Engagement)}
    assert engagements["e1"].start_date == date(2024, 1, 1)
    assert engagements["e1"].price_per_period == 15000
    assert engagements["e2"].client_dayoff_rate == 600
    assert engagements["e2"].developer_id == "d2"
