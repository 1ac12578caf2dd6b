"""Tests for holiday credit accounting."""

from datetime import date

from app.services.credits import (
    calculate_credit_balance,
    calculate_credit_days,
    explicit_credit_days,
    implicit_credit_days,
)

JAN = date(2024, 1, 1)


def test_explicit_credits_sum_within_month(make_credit):
    credits = [
        make_credit(date(2024, 1, 10), 1),
        make_credit(date(2024, 1, 20), 0.5),
        make_credit(date(2024, 2, 1), 3),
        make_credit(date(2024, 1, 5), 2, engagement_id="e2"),
    ]
    assert explicit_credit_days("e1", JAN, credits) == 1.5


def test_not_taken_holiday_counts_as_implicit_credit(make_holiday):
    holidays = [make_holiday(date(2024, 1, 1), "New Year", is_taken=False)]
    assert implicit_credit_days("e1", JAN, [], holidays) == 1


def test_taken_holiday_earns_nothing(make_holiday):
    holidays = [make_holiday(date(2024, 1, 1), "New Year", is_taken=True)]
    assert implicit_credit_days("e1", JAN, [], holidays) == 0


def test_explicit_credit_on_same_date_suppresses_holiday(make_credit, make_holiday):
    holidays = [make_holiday(date(2024, 1, 1), "New Year", is_taken=False)]
    credits = [make_credit(date(2024, 1, 1), 1, note="Credit from New Year")]
    assert calculate_credit_days("e1", JAN, credits, holidays) == 1


def test_credit_on_other_date_does_not_suppress_holiday(make_credit, make_holiday):
    holidays = [make_holiday(date(2024, 1, 1), "New Year", is_taken=False)]
    credits = [make_credit(date(2024, 1, 2), 1)]
    assert calculate_credit_days("e1", JAN, credits, holidays) == 2


def test_credit_of_other_engagement_does_not_suppress(make_credit, make_holiday):
    holidays = [make_holiday(date(2024, 1, 1), is_taken=False)]
    credits = [make_credit(date(2024, 1, 1), 1, engagement_id="e2")]
    assert calculate_credit_days("e1", JAN, credits, holidays) == 1


def test_holidays_omitted_counts_explicit_only(make_credit):
    credits = [make_credit(date(2024, 1, 15), 2)]
    assert calculate_credit_days("e1", JAN, credits) == 2
    assert implicit_credit_days("e1", JAN, credits, None) == 0


class TestCreditBalance:
    def test_balance_since_start(self, make_engagement, make_day_off, make_credit, make_holiday):
        engagement = make_engagement(start_date=date(2024, 1, 1))
        requests = [
            make_day_off(date(2024, 1, 10), 2),
            make_day_off(date(2024, 3, 4), 1),
            make_day_off(date(2024, 3, 20), 5, status="submitted"),
            make_day_off(date(2023, 12, 20), 4),
        ]
        credits = [make_credit(date(2024, 2, 1), 1.5), make_credit(date(2023, 12, 25), 1)]
        holidays = [
            make_holiday(date(2024, 5, 1), "Labour Day", is_taken=False),
            make_holiday(date(2024, 2, 1), "Covered", is_taken=False),
            make_holiday(date(2024, 8, 17), "Independence Day", is_taken=True),
        ]

        balance = calculate_credit_balance(engagement, requests, credits, holidays)

        assert balance.explicit_credit_days == 1.5
        assert balance.holiday_credit_days == 1
        assert balance.total_credit_days == 2.5
        assert balance.approved_days == 3
        assert balance.balance == -0.5

    def test_empty_engagement_has_zero_balance(self, make_engagement):
        balance = calculate_credit_balance(make_engagement(), [], [])
        assert balance.total_credit_days == 0
        assert balance.balance == 0
