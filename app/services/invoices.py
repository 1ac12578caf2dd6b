"""
Invoice materialization.

Months still in progress are always computed from live data. Once a month is
over, its invoices are frozen: the first request computes and stores one
snapshot per engagement, later requests read the snapshots back. Only the
credit figure of a stored snapshot is recomputed, so credits entered after
the fact (e.g. a past holiday marked "not taken") show up without changing
what the client was billed.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import date, datetime
from typing import Optional

from app.models.day_off import DayOffRequest
from app.models.engagement import Engagement
from app.models.holiday import Holiday, HolidayCredit
from app.models.invoice import Invoice
from app.services.credits import calculate_credit_days
from app.services.financials import MonthlyFinancials, calculate_monthly_financials
from app.services.invoice_store import InvoiceStore
from app.services.periods import add_months, get_month_key, is_engagement_active_in_month

logger = logging.getLogger(__name__)


def invoice_id(engagement_id: str, month: date) -> str:
    """Stable id of the snapshot for one engagement and month."""
    return f"{engagement_id}-{get_month_key(month).isoformat()}"


def is_past_month(month: date, today: Optional[date] = None) -> bool:
    """True when ``month`` starts before the current calendar month."""
    today = today or date.today()
    return get_month_key(month) < get_month_key(today)


def financials_from_invoice(
    invoice: Invoice, credit_days: Optional[float] = None
) -> MonthlyFinancials:
    """
    Rebuild MonthlyFinancials from a stored invoice.

    ``credit_days`` replaces the stored credit figure when given; every other
    field comes from the snapshot unchanged.
    """
    return MonthlyFinancials(
        engagement_id=invoice.engagement_id,
        month=get_month_key(invoice.month),
        approved_days=invoice.approved_days,
        credit_days=invoice.credit_days if credit_days is None else credit_days,
        billable_deduction_days=invoice.billable_deduction_days,
        section2_client_invoice=invoice.section2_client_invoice,
        section3_dev_pay=invoice.section3_dev_pay,
        section1_company_net=invoice.section1_company_net,
    )


def build_invoice_snapshot(
    financials: MonthlyFinancials,
    engagement: Engagement,
    created_at: Optional[datetime] = None,
) -> Invoice:
    """Invoice row freezing ``financials`` together with the engagement's current rates."""
    return Invoice(
        id=invoice_id(financials.engagement_id, financials.month),
        engagement_id=financials.engagement_id,
        month=financials.month,
        approved_days=financials.approved_days,
        credit_days=financials.credit_days,
        billable_deduction_days=financials.billable_deduction_days,
        section2_client_invoice=financials.section2_client_invoice,
        section3_dev_pay=financials.section3_dev_pay,
        section1_company_net=financials.section1_company_net,
        price_per_period=engagement.price_per_period,
        salary_per_period=engagement.salary_per_period,
        client_dayoff_rate=engagement.client_dayoff_rate,
        dev_dayoff_rate=engagement.dev_dayoff_rate,
        period_unit=engagement.period_unit,
        currency=engagement.currency,
        created_at=created_at or datetime.utcnow(),
    )


async def _load_stored_financials(
    store: InvoiceStore,
    month: date,
    active_engagements: list[Engagement],
    engagements_by_id: dict[str, Engagement],
    holiday_credits: list[HolidayCredit],
    holidays: Optional[list[Holiday]],
) -> Optional[list[MonthlyFinancials]]:
    """Stored financials for ``month``, or None when the store can't cover every engagement."""
    try:
        stored = await store.get_invoices(month)
    except Exception:
        logger.exception("Failed to fetch existing invoices for %s", month)
        return None

    covered = {invoice.engagement_id for invoice in stored}
    if not stored or any(engagement.id not in covered for engagement in active_engagements):
        return None

    results = []
    for invoice in stored:
        engagement = engagements_by_id.get(invoice.engagement_id)
        if engagement is None:
            # Engagement was deleted after the invoice was cut
            results.append(financials_from_invoice(invoice))
            continue
        credit_days = calculate_credit_days(engagement.id, month, holiday_credits, holidays)
        results.append(financials_from_invoice(invoice, credit_days))
    return results


async def _save_snapshots(store: InvoiceStore, invoices: list[Invoice], month: date) -> None:
    outcomes = await asyncio.gather(
        *(store.save_invoice(invoice) for invoice in invoices),
        return_exceptions=True,
    )
    for invoice, outcome in zip(invoices, outcomes):
        if isinstance(outcome, BaseException):
            logger.error("Failed to save invoice %s for %s", invoice.id, month, exc_info=outcome)


async def get_or_generate_invoices(
    store: InvoiceStore,
    engagements: Iterable[Engagement],
    day_off_requests: Iterable[DayOffRequest],
    holiday_credits: Iterable[HolidayCredit],
    month: date,
    holidays: Optional[Iterable[Holiday]] = None,
    *,
    today: Optional[date] = None,
) -> list[MonthlyFinancials]:
    """
    Financials for ``month``, reusing or creating stored invoices for past months.

    Store failures never reach the caller: a failed read falls back to live
    computation and failed writes are only logged.
    """
    month = get_month_key(month)
    engagements = list(engagements)
    day_off_requests = list(day_off_requests)
    holiday_credits = list(holiday_credits)
    holidays = list(holidays) if holidays is not None else None

    past_month = is_past_month(month, today)
    active_engagements = [e for e in engagements if is_engagement_active_in_month(e, month)]
    engagements_by_id = {engagement.id: engagement for engagement in engagements}

    if past_month and active_engagements:
        stored = await _load_stored_financials(
            store, month, active_engagements, engagements_by_id, holiday_credits, holidays
        )
        if stored is not None:
            return stored

    financials = calculate_monthly_financials(
        engagements, day_off_requests, holiday_credits, month, holidays
    )

    if past_month and financials:
        created_at = datetime.utcnow()
        invoices = [
            build_invoice_snapshot(item, engagements_by_id[item.engagement_id], created_at)
            for item in financials
        ]
        logger.info("Generating %d invoice(s) for %s", len(invoices), month)
        await _save_snapshots(store, invoices, month)

    return financials


def get_available_months(
    engagements: Iterable[Engagement], *, today: Optional[date] = None
) -> list[date]:
    """
    Month keys with at least one active engagement, most recent first.

    Each engagement contributes its months from its start through the earlier
    of its end month and the current month.
    """
    current_month = get_month_key(today or date.today())
    months: set[date] = set()

    for engagement in engagements:
        if not engagement.is_active:
            continue

        last_month = current_month
        if engagement.end_date is not None:
            last_month = min(last_month, get_month_key(engagement.end_date))

        month = get_month_key(engagement.start_date)
        while month <= last_month:
            if is_engagement_active_in_month(engagement, month):
                months.add(month)
            month = add_months(month, 1)

    return sorted(months, reverse=True)
