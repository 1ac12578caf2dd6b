"""
Calendar helpers shared by the financial engine.

Months are keyed by the date of their first day, so every value grouped by
month (day-off requests, credits, holidays, invoices) compares with plain
date equality.
"""

import calendar
from datetime import date, datetime

from app.models.engagement import Engagement


def _as_date(value: date | datetime | str) -> date:
    """Coerce a date, datetime or ISO string to a calendar date (time of day dropped)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def calculate_days(start_date: date | datetime | str, end_date: date | datetime | str) -> int:
    """
    Inclusive number of calendar days between two dates.

    Argument order does not matter: the span 1 Jan - 3 Jan is 3 days either way.
    """
    span = abs((_as_date(end_date) - _as_date(start_date)).days) + 1
    return max(0, span)


def get_month_key(value: date | datetime | str) -> date:
    """First day of the month containing ``value``."""
    d = _as_date(value)
    return date(d.year, d.month, 1)


def month_bounds(month: date | datetime | str) -> tuple[date, date]:
    """First and last calendar day of the month containing ``month``."""
    start = get_month_key(month)
    last_day = calendar.monthrange(start.year, start.month)[1]
    return start, date(start.year, start.month, last_day)


def add_months(month: date, count: int) -> date:
    """Month key ``count`` months after ``month`` (negative counts go back)."""
    index = month.year * 12 + (month.month - 1) + count
    return date(index // 12, index % 12 + 1, 1)


def is_engagement_active_in_month(engagement: Engagement, month: date | datetime | str) -> bool:
    """
    Whether an engagement is billable in a month.

    It must be flagged active, start on or before the month's last day, and
    either be open-ended or end on or after the month's first day.
    """
    if not engagement.is_active:
        return False

    month_start, month_end = month_bounds(month)

    if _as_date(engagement.start_date) > month_end:
        return False

    if engagement.end_date is not None and _as_date(engagement.end_date) < month_start:
        return False

    return True
