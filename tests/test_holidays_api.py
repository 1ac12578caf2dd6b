"""Tests for creating holidays and keeping their credits in sync."""

from datetime import date, datetime

import pytest
from sqlalchemy.dialects import postgresql

from app.models import Holiday, HolidayCredit
from app.schemas import HolidayCreate


@pytest.fixture
def added_rows(mock_db_session):
    """Capture rows passed to add_all and give them the ids a flush would."""
    added = []

    def fake_add_all(rows):
        for n, row in enumerate(rows):
            row.id = f"row{len(added) + n}"
            row.created_at = datetime(2024, 12, 1)
        added.extend(rows)

    mock_db_session.add_all.side_effect = fake_add_all
    return added


def test_holiday_create_defaults_to_not_taken():
    holiday = HolidayCreate(engagement_id="e1", date=date(2024, 1, 1), name="New Year")
    assert holiday.is_taken is False


@pytest.mark.asyncio
async def test_create_holiday_records_credit_when_not_taken(
    app_client, login_as, admin_user, mock_db_session, make_engagement, added_rows
):
    login_as(admin_user)
    mock_db_session.get.return_value = make_engagement()

    response = await app_client.post(
        "/api/holidays",
        json={"engagementId": "e1", "date": "2024-01-01", "name": "New Year"},
    )

    assert response.status_code == 201
    assert response.json()["isTaken"] is False
    [holiday, credit] = added_rows
    assert isinstance(holiday, Holiday)
    assert isinstance(credit, HolidayCredit)
    assert credit.note == "Credit from New Year"
    assert credit.created_by == admin_user.id


@pytest.mark.asyncio
async def test_create_taken_holiday_records_no_credit(
    app_client, login_as, admin_user, mock_db_session, make_engagement, added_rows
):
    login_as(admin_user)
    mock_db_session.get.return_value = make_engagement()

    response = await app_client.post(
        "/api/holidays",
        json={"engagementId": "e1", "date": "2024-01-01", "name": "New Year", "isTaken": True},
    )

    assert response.status_code == 201
    assert [type(row) for row in added_rows] == [Holiday]


@pytest.mark.asyncio
async def test_holiday_range_creates_one_holiday_and_credit_per_day(
    app_client, login_as, admin_user, mock_db_session, make_engagement, added_rows
):
    login_as(admin_user)
    mock_db_session.get.return_value = make_engagement()

    response = await app_client.post(
        "/api/holidays/range",
        json={
            "engagementId": "e1",
            "name": "Christmas",
            "startDate": "2024-12-24",
            "endDate": "2024-12-26",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert [h["date"] for h in body["holidays"]] == ["2024-12-24", "2024-12-25", "2024-12-26"]
    assert all(h["name"] == "Christmas" and h["isTaken"] is False for h in body["holidays"])
    assert body["creditsCreated"] == 3

    credits = [row for row in added_rows if isinstance(row, HolidayCredit)]
    assert [c.date for c in credits] == [date(2024, 12, 24), date(2024, 12, 25), date(2024, 12, 26)]
    assert all(c.note == "Credit from Christmas" and c.credit_days == 1 for c in credits)
    assert mock_db_session.refresh.await_count == 3


@pytest.mark.asyncio
async def test_taken_holiday_range_creates_no_credits(
    app_client, login_as, admin_user, mock_db_session, make_engagement, added_rows
):
    login_as(admin_user)
    mock_db_session.get.return_value = make_engagement()

    response = await app_client.post(
        "/api/holidays/range",
        json={
            "engagementId": "e1",
            "name": "Office closed",
            "startDate": "2024-12-30",
            "endDate": "2025-01-01",
            "isTaken": True,
        },
    )

    assert response.status_code == 201
    assert response.json()["creditsCreated"] == 0
    assert len(response.json()["holidays"]) == 3
    assert not any(isinstance(row, HolidayCredit) for row in added_rows)


@pytest.mark.asyncio
async def test_holiday_range_rejects_end_before_start(app_client, login_as, admin_user):
    login_as(admin_user)

    response = await app_client.post(
        "/api/holidays/range",
        json={
            "engagementId": "e1",
            "name": "Christmas",
            "startDate": "2024-12-26",
            "endDate": "2024-12-24",
        },
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_holiday_range_rejects_spans_over_a_year(app_client, login_as, admin_user):
    login_as(admin_user)

    response = await app_client.post(
        "/api/holidays/range",
        json={
            "engagementId": "e1",
            "name": "Sabbatical",
            "startDate": "2024-01-01",
            "endDate": "2025-01-01",
        },
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_holiday_range_unknown_engagement_returns_404(
    app_client, login_as, admin_user, mock_db_session
):
    login_as(admin_user)
    mock_db_session.get.return_value = None

    response = await app_client.post(
        "/api/holidays/range",
        json={
            "engagementId": "missing",
            "name": "Christmas",
            "startDate": "2024-12-24",
            "endDate": "2024-12-26",
        },
    )

    assert response.status_code == 404
    mock_db_session.add_all.assert_not_called()


@pytest.mark.asyncio
async def test_toggle_to_taken_matches_credit_note_exactly(
    app_client, login_as, admin_user, mock_db_session, scalars_result, make_holiday
):
    login_as(admin_user)
    mock_db_session.get.return_value = make_holiday(date(2024, 1, 1), "50% day_off", is_taken=False)
    mock_db_session.execute.return_value = scalars_result([])

    response = await app_client.post("/api/holidays/h1/toggle-taken")

    assert response.status_code == 200
    statement = mock_db_session.execute.call_args.args[0]
    compiled = statement.compile(dialect=postgresql.dialect())
    assert "holiday_credits.note = " in str(compiled)
    assert "LIKE" not in str(compiled).upper()
    assert "Credit from 50% day_off" in compiled.params.values()
    mock_db_session.delete.assert_not_called()
