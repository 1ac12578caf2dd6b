"""
Engagements API router.
Admin-only CRUD for engagements plus the running credit balance.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import ValidationError
from app.middleware.auth import require_admin
from app.models.client import Client
from app.models.day_off import DayOffRequest
from app.models.developer import Developer
from app.models.engagement import Engagement
from app.models.holiday import Holiday, HolidayCredit
from app.models.user import User
from app.schemas.engagement import (
    CreditBalanceResponse,
    EngagementCreate,
    EngagementResponse,
    EngagementUpdate,
)
from app.services.credits import calculate_credit_balance
from app.services.lookups import apply_updates, ensure_id_free, get_or_404

router = APIRouter()


@router.get("/engagements", response_model=List[EngagementResponse])
async def get_engagements(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """List all engagements, newest first."""
    result = await db.execute(select(Engagement).order_by(Engagement.created_at.desc()))
    return result.scalars().all()


@router.post("/engagements", response_model=EngagementResponse, status_code=201)
async def create_engagement(
    data: EngagementCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Create an engagement between an existing developer and client."""
    await ensure_id_free(db, Engagement, data.id, "Engagement")
    await get_or_404(db, Developer, data.developer_id, "Developer")
    await get_or_404(db, Client, data.client_id, "Client")

    engagement = Engagement(**data.model_dump(exclude_none=True))
    db.add(engagement)
    await db.commit()
    await db.refresh(engagement)
    return engagement


@router.put("/engagements/{engagement_id}", response_model=EngagementResponse)
async def update_engagement(
    engagement_id: str,
    data: EngagementUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Update an engagement.

    Invoices already generated for closed months keep the rates they were
    generated with.
    """
    engagement = await get_or_404(db, Engagement, engagement_id, "Engagement")
    if data.developer_id is not None:
        await get_or_404(db, Developer, data.developer_id, "Developer")
    if data.client_id is not None:
        await get_or_404(db, Client, data.client_id, "Client")

    apply_updates(engagement, data)
    if engagement.end_date is not None and engagement.end_date < engagement.start_date:
        raise ValidationError("endDate must not be before startDate")

    await db.commit()
    await db.refresh(engagement)
    return engagement


@router.delete("/engagements/{engagement_id}")
async def delete_engagement(
    engagement_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    engagement = await get_or_404(db, Engagement, engagement_id, "Engagement")
    await db.delete(engagement)
    await db.commit()
    return {"success": True}


@router.get("/engagements/{engagement_id}/credit-balance", response_model=CreditBalanceResponse)
async def get_credit_balance(
    engagement_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Credits earned minus approved days off since the engagement started.

    Shown next to the developer's day-off calendar.
    """
    engagement = await get_or_404(db, Engagement, engagement_id, "Engagement")

    day_offs = await db.execute(
        select(DayOffRequest).where(DayOffRequest.engagement_id == engagement_id)
    )
    credits = await db.execute(
        select(HolidayCredit).where(HolidayCredit.engagement_id == engagement_id)
    )
    holidays = await db.execute(select(Holiday).where(Holiday.engagement_id == engagement_id))

    balance = calculate_credit_balance(
        engagement,
        day_offs.scalars().all(),
        credits.scalars().all(),
        holidays.scalars().all(),
    )
    return CreditBalanceResponse(
        engagement_id=balance.engagement_id,
        explicit_credit_days=balance.explicit_credit_days,
        holiday_credit_days=balance.holiday_credit_days,
        total_credit_days=balance.total_credit_days,
        approved_days=balance.approved_days,
        balance=balance.balance,
    )
