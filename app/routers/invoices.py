"""
Invoices and monthly financials API router.

GET /financials is the entry point of the invoicing workflow: for a closed
month it returns the frozen snapshots, generating them on first access.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db, get_session_factory
from app.exceptions import ValidationError
from app.middleware.auth import get_current_user, require_admin
from app.models.day_off import APPROVED_STATUS, DayOffRequest
from app.models.engagement import Engagement
from app.models.holiday import Holiday, HolidayCredit
from app.models.invoice import Invoice
from app.models.user import User
from app.schemas.invoice import InvoiceResponse, InvoiceUpsert, MonthlyFinancialsResponse
from app.services.auth import get_developer_engagement_ids, get_user_developer_id
from app.services.invoice_store import (
    InvoiceStore,
    SqlInvoiceStore,
    build_invoice_query,
    build_invoice_upsert,
)
from app.services.invoices import (
    get_available_months,
    get_or_generate_invoices,
    invoice_id,
)
from app.services.lookups import get_or_404
from app.services.periods import get_month_key

router = APIRouter()


def get_invoice_store() -> InvoiceStore:
    """Dependency providing the invoice store used by /financials."""
    return SqlInvoiceStore(get_session_factory())


def parse_month(value: str) -> date:
    """Month key from "YYYY-MM" or any "YYYY-MM-DD" inside the month."""
    if len(value) == 7:
        value = f"{value}-01"
    try:
        return get_month_key(value)
    except ValueError:
        raise ValidationError(f"Invalid month: {value}") from None


@router.get("/invoices", response_model=List[InvoiceResponse])
async def get_invoices(
    month: Optional[str] = Query(None),
    engagement_id: Optional[str] = Query(None, alias="engagementId"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List stored invoices, newest month first.

    Non-admins only see invoices of their own developer's engagements.
    """
    query = build_invoice_query(
        parse_month(month) if month else None,
        engagement_id,
    )

    if not current_user.is_admin:
        developer_id = await get_user_developer_id(db, current_user.id)
        if developer_id is None:
            return []
        engagement_ids = await get_developer_engagement_ids(db, developer_id)
        if not engagement_ids:
            return []
        query = query.where(Invoice.engagement_id.in_(engagement_ids))

    result = await db.execute(query)
    return result.scalars().all()


@router.post("/invoices", response_model=InvoiceResponse, status_code=201)
async def upsert_invoice(
    data: InvoiceUpsert,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Insert an invoice, replacing any existing one for the same engagement and month."""
    await get_or_404(db, Engagement, data.engagement_id, "Engagement")

    month = get_month_key(data.month)
    values = data.model_dump()
    values["month"] = month
    values["id"] = data.id or invoice_id(data.engagement_id, month)
    values["created_at"] = None

    await db.execute(build_invoice_upsert(Invoice(**values)))
    await db.commit()

    result = await db.execute(build_invoice_query(month, data.engagement_id))
    return result.scalars().first()


@router.get("/financials", response_model=List[MonthlyFinancialsResponse])
async def get_financials(
    month: str = Query(...),
    db: AsyncSession = Depends(get_db),
    store: InvoiceStore = Depends(get_invoice_store),
    admin: User = Depends(require_admin),
):
    """Financials of every engagement active in ``month``."""
    month_key = parse_month(month)

    engagements = await db.execute(select(Engagement).order_by(Engagement.created_at))
    day_offs = await db.execute(
        select(DayOffRequest).where(DayOffRequest.status == APPROVED_STATUS)
    )
    credits = await db.execute(select(HolidayCredit))
    holidays = await db.execute(select(Holiday))

    return await get_or_generate_invoices(
        store,
        engagements.scalars().all(),
        day_offs.scalars().all(),
        credits.scalars().all(),
        month_key,
        holidays.scalars().all(),
    )


@router.get("/financials/months")
async def get_financial_months(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Months with at least one active engagement, most recent first, as "YYYY-MM"."""
    result = await db.execute(select(Engagement))
    months = get_available_months(result.scalars().all())
    return {"months": [month.strftime("%Y-%m") for month in months]}
