"""
Monthly financial calculator.

For every engagement active in a month this derives:

- section 2, the client invoice: monthly price minus billable days off at
  the client day-off rate;
- section 3, developer pay: monthly salary minus billable days off at the
  developer day-off rate;
- section 1, company net: section 2 minus section 3.

Billable days off are approved days off (by start date) less the month's
credit days, never below zero. Amounts are left unrounded.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Optional

from app.models.day_off import APPROVED_STATUS, DayOffRequest
from app.models.engagement import Engagement
from app.models.holiday import Holiday, HolidayCredit
from app.services.credits import calculate_credit_days
from app.services.periods import get_month_key, is_engagement_active_in_month

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class MonthlyFinancials:
    """Computed breakdown of one engagement for one month."""

    engagement_id: str
    month: date
    approved_days: int
    credit_days: float
    billable_deduction_days: float
    section2_client_invoice: float
    section3_dev_pay: float
    section1_company_net: float


def to_monthly_rate(amount: float, period_unit: str) -> float:
    """Convert a per-period amount to a monthly one (weeks use 52/12 weeks per month)."""
    if period_unit == "week":
        return amount * WEEKS_PER_YEAR / MONTHS_PER_YEAR
    return amount


def approved_days_in_month(
    engagement_id: str,
    month: date,
    day_off_requests: Iterable[DayOffRequest],
) -> int:
    """Days of the engagement's approved requests that start in ``month``."""
    month = get_month_key(month)
    return sum(
        request.days
        for request in day_off_requests
        if request.engagement_id == engagement_id
        and request.status == APPROVED_STATUS
        and get_month_key(request.start_date) == month
    )


def calculate_engagement_financials(
    engagement: Engagement,
    month: date,
    approved_days: int,
    credit_days: float,
) -> MonthlyFinancials:
    """Apply an engagement's rates to its approved and credit days for a month."""
    billable_deduction_days = max(0, approved_days - credit_days)

    monthly_price = to_monthly_rate(engagement.price_per_period, engagement.period_unit)
    monthly_salary = to_monthly_rate(engagement.salary_per_period, engagement.period_unit)

    section2_client_invoice = monthly_price - billable_deduction_days * engagement.client_dayoff_rate
    section3_dev_pay = monthly_salary - billable_deduction_days * engagement.dev_dayoff_rate
    section1_company_net = section2_client_invoice - section3_dev_pay

    return MonthlyFinancials(
        engagement_id=engagement.id,
        month=get_month_key(month),
        approved_days=approved_days,
        credit_days=credit_days,
        billable_deduction_days=billable_deduction_days,
        section2_client_invoice=section2_client_invoice,
        section3_dev_pay=section3_dev_pay,
        section1_company_net=section1_company_net,
    )


def calculate_monthly_financials(
    engagements: Iterable[Engagement],
    day_off_requests: Iterable[DayOffRequest],
    holiday_credits: Iterable[HolidayCredit],
    month: date,
    holidays: Optional[Iterable[Holiday]] = None,
) -> list[MonthlyFinancials]:
    """
    Financials for every engagement active in ``month``.

    Results follow the order of ``engagements``.
    """
    month = get_month_key(month)
    day_off_requests = list(day_off_requests)
    holiday_credits = list(holiday_credits)
    holidays = list(holidays) if holidays is not None else None

    results = []
    for engagement in engagements:
        if not is_engagement_active_in_month(engagement, month):
            continue

        approved_days = approved_days_in_month(engagement.id, month, day_off_requests)
        credit_days = calculate_credit_days(engagement.id, month, holiday_credits, holidays)
        results.append(calculate_engagement_financials(engagement, month, approved_days, credit_days))

    return results
