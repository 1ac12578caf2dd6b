"""
Holiday credit accounting.

An engagement earns credit days in two ways:

- explicit: HolidayCredit records, granted by an admin or created when a
  holiday is marked "not taken";
- implicit: holidays with is_taken false that have no HolidayCredit on the
  same engagement and the exact same date.

Credits offset approved days off before any deduction is billed.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Optional

from app.models.day_off import APPROVED_STATUS, DayOffRequest
from app.models.engagement import Engagement
from app.models.holiday import Holiday, HolidayCredit
from app.services.periods import get_month_key


@dataclass(frozen=True)
class CreditBalance:
    """Running credit position of an engagement since its start date."""

    engagement_id: str
    explicit_credit_days: float
    holiday_credit_days: int
    approved_days: int

    @property
    def total_credit_days(self) -> float:
        return self.explicit_credit_days + self.holiday_credit_days

    @property
    def balance(self) -> float:
        return self.total_credit_days - self.approved_days


def _has_explicit_credit(holiday: Holiday, holiday_credits: Iterable[HolidayCredit]) -> bool:
    # Matched on the exact date across all credits, not only the holiday's month
    return any(
        credit.engagement_id == holiday.engagement_id and credit.date == holiday.date
        for credit in holiday_credits
    )


def _uncredited_holidays(
    engagement_id: str,
    holiday_credits: list[HolidayCredit],
    holidays: Iterable[Holiday],
) -> list[Holiday]:
    """Not-taken holidays of an engagement that no explicit credit covers."""
    return [
        holiday
        for holiday in holidays
        if holiday.engagement_id == engagement_id
        and not holiday.is_taken
        and not _has_explicit_credit(holiday, holiday_credits)
    ]


def explicit_credit_days(
    engagement_id: str,
    month: date,
    holiday_credits: Iterable[HolidayCredit],
) -> float:
    """Sum of credit_days over the engagement's credits dated in ``month``."""
    month = get_month_key(month)
    return sum(
        credit.credit_days
        for credit in holiday_credits
        if credit.engagement_id == engagement_id and get_month_key(credit.date) == month
    )


def implicit_credit_days(
    engagement_id: str,
    month: date,
    holiday_credits: Iterable[HolidayCredit],
    holidays: Optional[Iterable[Holiday]],
) -> int:
    """Number of uncredited, not-taken holidays of the engagement in ``month``."""
    if holidays is None:
        return 0
    month = get_month_key(month)
    uncredited = _uncredited_holidays(engagement_id, list(holiday_credits), holidays)
    return sum(1 for holiday in uncredited if get_month_key(holiday.date) == month)


def calculate_credit_days(
    engagement_id: str,
    month: date,
    holiday_credits: Iterable[HolidayCredit],
    holidays: Optional[Iterable[Holiday]] = None,
) -> float:
    """Total credit days (explicit + implicit) of an engagement for one month."""
    holiday_credits = list(holiday_credits)
    return explicit_credit_days(engagement_id, month, holiday_credits) + implicit_credit_days(
        engagement_id, month, holiday_credits, holidays
    )


def calculate_credit_balance(
    engagement: Engagement,
    day_off_requests: Iterable[DayOffRequest],
    holiday_credits: Iterable[HolidayCredit],
    holidays: Optional[Iterable[Holiday]] = None,
) -> CreditBalance:
    """
    Credits earned minus approved days off since the engagement started.

    Uses the same counting rules as the monthly figures, but over every date
    on or after ``engagement.start_date`` instead of a single month.
    """
    holiday_credits = list(holiday_credits)
    start = engagement.start_date

    explicit = sum(
        credit.credit_days
        for credit in holiday_credits
        if credit.engagement_id == engagement.id and credit.date >= start
    )

    implicit = 0
    if holidays is not None:
        uncredited = _uncredited_holidays(engagement.id, holiday_credits, holidays)
        implicit = sum(1 for holiday in uncredited if holiday.date >= start)

    approved = sum(
        request.days
        for request in day_off_requests
        if request.engagement_id == engagement.id
        and request.status == APPROVED_STATUS
        and request.start_date >= start
    )

    return CreditBalance(
        engagement_id=engagement.id,
        explicit_credit_days=explicit,
        holiday_credit_days=implicit,
        approved_days=approved,
    )
