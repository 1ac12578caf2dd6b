"""Tests for the monthly financial calculator."""

from datetime import date

import pytest

from app.services.financials import (
    approved_days_in_month,
    calculate_monthly_financials,
    to_monthly_rate,
)

MARCH = date(2024, 3, 1)


def test_five_approved_days_without_credits(make_engagement, make_day_off):
    requests = [make_day_off(date(2024, 3, 11), 5)]

    [result] = calculate_monthly_financials([make_engagement()], requests, [], MARCH)

    assert result.engagement_id == "e1"
    assert result.month == MARCH
    assert result.approved_days == 5
    assert result.credit_days == 0
    assert result.billable_deduction_days == 5
    assert result.section2_client_invoice == 11250
    assert result.section3_dev_pay == 7500
    assert result.section1_company_net == 3750


def test_worked_holiday_offsets_one_day(make_engagement, make_day_off, make_holiday):
    requests = [make_day_off(date(2024, 3, 11), 5)]
    holidays = [make_holiday(date(2024, 3, 29), "Good Friday", is_taken=False)]

    [result] = calculate_monthly_financials(
        [make_engagement()], requests, [], MARCH, holidays
    )

    assert result.credit_days == 1
    assert result.billable_deduction_days == 4
    assert result.section2_client_invoice == 15000 - 4 * 750
    assert result.section3_dev_pay == 10000 - 4 * 500
    assert result.section1_company_net == 4000


def test_weekly_rates_are_normalized_to_a_month(make_engagement):
    engagement = make_engagement(
        period_unit="week", price_per_period=3000, salary_per_period=1200
    )

    [result] = calculate_monthly_financials([engagement], [], [], MARCH)

    assert result.section2_client_invoice == pytest.approx(13000)
    assert result.section3_dev_pay == pytest.approx(5200)
    assert result.section1_company_net == pytest.approx(7800)


def test_to_monthly_rate():
    assert to_monthly_rate(3000, "week") == pytest.approx(13000)
    assert to_monthly_rate(3000, "month") == 3000


def test_engagement_ended_before_month_is_excluded(make_engagement):
    ended = make_engagement(id="e-ended", end_date=date(2024, 2, 29))
    running = make_engagement(id="e-running")

    results = calculate_monthly_financials([ended, running], [], [], MARCH)

    assert [r.engagement_id for r in results] == ["e-running"]


def test_credit_on_holiday_date_counted_once(
    make_engagement, make_day_off, make_credit, make_holiday
):
    requests = [make_day_off(date(2024, 3, 11), 3)]
    holidays = [make_holiday(date(2024, 3, 29), "Good Friday", is_taken=False)]
    credits = [make_credit(date(2024, 3, 29), 1, note="Credit from Good Friday")]

    [result] = calculate_monthly_financials(
        [make_engagement()], requests, credits, MARCH, holidays
    )

    assert result.credit_days == 1
    assert result.billable_deduction_days == 2


def test_credits_beyond_days_off_never_go_negative(make_engagement, make_day_off, make_credit):
    requests = [make_day_off(date(2024, 3, 11), 1)]
    credits = [make_credit(date(2024, 3, 2), 3)]

    [result] = calculate_monthly_financials([make_engagement()], requests, credits, MARCH)

    assert result.billable_deduction_days == 0
    assert result.section2_client_invoice == 15000
    assert result.section3_dev_pay == 10000


def test_only_approved_requests_starting_in_month_count(make_day_off):
    requests = [
        make_day_off(date(2024, 3, 1), 2),
        make_day_off(date(2024, 3, 30), 4, end_date=date(2024, 4, 2)),
        make_day_off(date(2024, 2, 28), 3, end_date=date(2024, 3, 1)),
        make_day_off(date(2024, 3, 5), 5, status="submitted"),
        make_day_off(date(2024, 3, 6), 7, engagement_id="e2"),
    ]

    assert approved_days_in_month("e1", MARCH, requests) == 6


def test_inactive_and_future_engagements_are_skipped(make_engagement):
    engagements = [
        make_engagement(id="inactive", is_active=False),
        make_engagement(id="future", start_date=date(2024, 4, 1)),
    ]
    assert calculate_monthly_financials(engagements, [], [], MARCH) == []


def test_results_do_not_depend_on_input_order(
    make_engagement, make_day_off, make_credit, make_holiday
):
    engagements = [make_engagement(id="e1"), make_engagement(id="e2", price_per_period=9000)]
    requests = [
        make_day_off(date(2024, 3, 4), 2),
        make_day_off(date(2024, 3, 18), 3, engagement_id="e2"),
    ]
    credits = [make_credit(date(2024, 3, 8), 1), make_credit(date(2024, 3, 8), 1, engagement_id="e2")]
    holidays = [make_holiday(date(2024, 3, 29), is_taken=False, engagement_id="e2")]

    forward = calculate_monthly_financials(engagements, requests, credits, MARCH, holidays)
    backward = calculate_monthly_financials(
        list(reversed(engagements)),
        list(reversed(requests)),
        list(reversed(credits)),
        MARCH,
        list(reversed(holidays)),
    )

    assert sorted(forward, key=lambda r: r.engagement_id) == sorted(
        backward, key=lambda r: r.engagement_id
    )


def test_month_argument_normalized_to_first_day(make_engagement):
    [result] = calculate_monthly_financials([make_engagement()], [], [], date(2024, 3, 17))
    assert result.month == MARCH
