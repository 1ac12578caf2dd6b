"""
Holiday credits API router.
Admin-only CRUD for manually granted credit days.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.middleware.auth import require_admin
from app.models.engagement import Engagement
from app.models.holiday import HolidayCredit
from app.models.user import User
from app.schemas.holiday import (
    HolidayCreditCreate,
    HolidayCreditResponse,
    HolidayCreditUpdate,
)
from app.services.lookups import apply_updates, ensure_id_free, get_or_404

router = APIRouter()


@router.get("/holiday-credits", response_model=List[HolidayCreditResponse])
async def get_holiday_credits(
    engagement_id: Optional[str] = Query(None, alias="engagementId"),
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    query = select(HolidayCredit).order_by(HolidayCredit.date.desc())
    if engagement_id:
        query = query.where(HolidayCredit.engagement_id == engagement_id)

    result = await db.execute(query)
    return result.scalars().all()


@router.post("/holiday-credits", response_model=HolidayCreditResponse, status_code=201)
async def create_holiday_credit(
    data: HolidayCreditCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Grant credit days to an engagement on a given date."""
    await ensure_id_free(db, HolidayCredit, data.id, "Holiday credit")
    await get_or_404(db, Engagement, data.engagement_id, "Engagement")

    credit = HolidayCredit(**data.model_dump(exclude_none=True), created_by=admin.id)
    db.add(credit)
    await db.commit()
    await db.refresh(credit)
    return credit


@router.put("/holiday-credits/{credit_id}", response_model=HolidayCreditResponse)
async def update_holiday_credit(
    credit_id: str,
    data: HolidayCreditUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    credit = await get_or_404(db, HolidayCredit, credit_id, "Holiday credit")
    apply_updates(credit, data)
    await db.commit()
    await db.refresh(credit)
    return credit


@router.delete("/holiday-credits/{credit_id}")
async def delete_holiday_credit(
    credit_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    credit = await get_or_404(db, HolidayCredit, credit_id, "Holiday credit")
    await db.delete(credit)
    await db.commit()
    return {"success": True}
