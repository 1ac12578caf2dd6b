"""
Persistence for invoice snapshots.

The financial engine only depends on the InvoiceStore protocol; the
SQLAlchemy implementation below stores invoices in PostgreSQL with one row
per (engagement_id, month).
"""

from datetime import date, datetime
from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.invoice import Invoice
from app.services.periods import get_month_key

INVOICE_FIELDS = (
    "id",
    "engagement_id",
    "month",
    "approved_days",
    "credit_days",
    "billable_deduction_days",
    "section2_client_invoice",
    "section3_dev_pay",
    "section1_company_net",
    "price_per_period",
    "salary_per_period",
    "client_dayoff_rate",
    "dev_dayoff_rate",
    "period_unit",
    "currency",
    "created_at",
)

# Columns identifying a snapshot; everything else is replaced on upsert
_KEY_FIELDS = ("id", "engagement_id", "month")


class InvoiceStore(Protocol):
    """Read/upsert access to persisted invoices."""

    async def get_invoices(
        self, month: Optional[date] = None, engagement_id: Optional[str] = None
    ) -> list[Invoice]: ...

    async def save_invoice(self, invoice: Invoice) -> None: ...


def build_invoice_query(month: Optional[date] = None, engagement_id: Optional[str] = None):
    """Select invoices, newest month first, optionally filtered."""
    query = select(Invoice)
    if month is not None:
        query = query.where(Invoice.month == get_month_key(month))
    if engagement_id is not None:
        query = query.where(Invoice.engagement_id == engagement_id)
    return query.order_by(Invoice.month.desc(), Invoice.created_at.desc())


def build_invoice_upsert(invoice: Invoice):
    """INSERT ... ON CONFLICT (engagement_id, month) DO UPDATE for one snapshot."""
    values = {name: getattr(invoice, name) for name in INVOICE_FIELDS}
    values["month"] = get_month_key(invoice.month)
    if values["created_at"] is None:
        values["created_at"] = datetime.utcnow()

    stmt = pg_insert(Invoice).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=[Invoice.engagement_id, Invoice.month],
        set_={
            name: stmt.excluded[name] for name in INVOICE_FIELDS if name not in _KEY_FIELDS
        },
    )


class SqlInvoiceStore:
    """
    InvoiceStore backed by the invoices table.

    Each call opens its own session, so saves for several engagements can
    run concurrently without sharing a connection.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_invoices(
        self, month: Optional[date] = None, engagement_id: Optional[str] = None
    ) -> list[Invoice]:
        async with self._session_factory() as session:
            result = await session.execute(build_invoice_query(month, engagement_id))
            return list(result.scalars().all())

    async def save_invoice(self, invoice: Invoice) -> None:
        async with self._session_factory() as session:
            try:
                await session.execute(build_invoice_upsert(invoice))
                await session.commit()
            except Exception:
                await session.rollback()
                raise
