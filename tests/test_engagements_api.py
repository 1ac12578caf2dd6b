"""Tests for engagement, day-off and holiday endpoints."""

from datetime import date, datetime

import pytest

from app.models import HolidayCredit


@pytest.mark.asyncio
async def test_engagements_require_login(app_client):
    response = await app_client.get("/api/engagements")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_engagements_require_admin(app_client, login_as, employee_user):
    login_as(employee_user)
    response = await app_client.get("/api/engagements")
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_engagement_rejects_negative_rates(app_client, login_as, admin_user):
    login_as(admin_user)
    response = await app_client.post(
        "/api/engagements",
        json={
            "developerId": "d1",
            "clientId": "c1",
            "startDate": "2024-01-01",
            "pricePerPeriod": -1,
            "salaryPerPeriod": 10000,
        },
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_engagement_rejects_end_before_start(app_client, login_as, admin_user):
    login_as(admin_user)
    response = await app_client.post(
        "/api/engagements",
        json={
            "developerId": "d1",
            "clientId": "c1",
            "startDate": "2024-03-01",
            "endDate": "2024-02-01",
            "pricePerPeriod": 15000,
            "salaryPerPeriod": 10000,
        },
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_engagement_returns_404(app_client, login_as, admin_user, mock_db_session):
    login_as(admin_user)
    mock_db_session.get.return_value = None

    response = await app_client.get("/api/engagements/missing/credit-balance")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_credit_balance(
    app_client,
    login_as,
    admin_user,
    mock_db_session,
    scalars_result,
    make_engagement,
    make_day_off,
    make_credit,
    make_holiday,
):
    login_as(admin_user)
    mock_db_session.get.return_value = make_engagement()
    mock_db_session.execute.side_effect = [
        scalars_result([make_day_off(date(2024, 2, 5), 3)]),
        scalars_result([make_credit(date(2024, 1, 10), 1)]),
        scalars_result([make_holiday(date(2024, 5, 1), is_taken=False)]),
    ]

    response = await app_client.get("/api/engagements/e1/credit-balance")

    assert response.status_code == 200
    data = response.json()
    assert data["explicitCreditDays"] == 1
    assert data["holidayCreditDays"] == 1
    assert data["totalCreditDays"] == 2
    assert data["approvedDays"] == 3
    assert data["balance"] == -1


@pytest.mark.asyncio
async def test_day_off_for_other_developer_forbidden(
    app_client,
    login_as,
    employee_user,
    mock_db_session,
    scalars_result,
    make_engagement,
):
    login_as(employee_user)
    mock_db_session.get.return_value = make_engagement(developer_id="d1")
    mock_db_session.execute.return_value = scalars_result(["d2"])

    response = await app_client.post(
        "/api/day-off-requests",
        json={"engagementId": "e1", "startDate": "2024-03-04", "endDate": "2024-03-06"},
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_day_off_days_derived_from_dates(
    app_client,
    login_as,
    employee_user,
    mock_db_session,
    scalars_result,
    make_engagement,
):
    login_as(employee_user)
    mock_db_session.get.side_effect = [make_engagement(developer_id="d1")]
    mock_db_session.execute.return_value = scalars_result(["d1"])

    added = []

    def fake_add(request):
        request.id = "r1"
        request.created_at = request.updated_at = datetime(2024, 3, 1)
        added.append(request)

    mock_db_session.add.side_effect = fake_add

    response = await app_client.post(
        "/api/day-off-requests",
        json={"engagementId": "e1", "startDate": "2024-03-04", "endDate": "2024-03-06"},
    )

    assert response.status_code == 201
    assert added[0].days == 3
    assert added[0].developer_id == "d1"
    assert added[0].client_id == "c1"
    assert added[0].submitted_by == employee_user.id
    assert response.json()["days"] == 3


@pytest.mark.asyncio
async def test_toggle_holiday_to_not_taken_creates_credit(
    app_client, login_as, admin_user, mock_db_session, make_holiday
):
    login_as(admin_user)
    holiday = make_holiday(date(2024, 1, 1), "New Year", is_taken=True)
    mock_db_session.get.return_value = holiday

    response = await app_client.post(f"/api/holidays/{holiday.id}/toggle-taken")

    assert response.status_code == 200
    assert response.json()["isTaken"] is False
    [credit] = [c.args[0] for c in mock_db_session.add.call_args_list]
    assert isinstance(credit, HolidayCredit)
    assert credit.engagement_id == "e1"
    assert credit.date == date(2024, 1, 1)
    assert credit.credit_days == 1
    assert credit.note == "Credit from New Year"


@pytest.mark.asyncio
async def test_toggle_holiday_to_taken_removes_credit(
    app_client,
    login_as,
    admin_user,
    mock_db_session,
    scalars_result,
    make_holiday,
    make_credit,
):
    login_as(admin_user)
    holiday = make_holiday(date(2024, 1, 1), "New Year", is_taken=False)
    credit = make_credit(date(2024, 1, 1), note="Credit from New Year")
    mock_db_session.get.return_value = holiday
    mock_db_session.execute.return_value = scalars_result([credit])

    response = await app_client.post(f"/api/holidays/{holiday.id}/toggle-taken")

    assert response.status_code == 200
    assert response.json()["isTaken"] is True
    mock_db_session.delete.assert_awaited_once_with(credit)
    mock_db_session.add.assert_not_called()
