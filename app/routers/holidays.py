"""
Holidays API router.

Besides CRUD this handles the "taken / not taken" toggle: a holiday the
developer worked through is turned into an explicit HolidayCredit, and the
credit is removed again when the holiday is marked taken. Every way of
creating holidays (single, range, bulk) records that credit up front for
holidays created as not taken.
"""

from datetime import timedelta
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import ValidationError
from app.middleware.auth import require_admin
from app.models.engagement import Engagement
from app.models.holiday import Holiday, HolidayCredit
from app.models.user import User
from app.schemas.holiday import (
    HolidayBulkCreate,
    HolidayBulkResponse,
    HolidayCreate,
    HolidayRangeCreate,
    HolidayResponse,
    HolidayUpdate,
)
from app.services.lookups import apply_updates, ensure_id_free, get_or_404

router = APIRouter()


def credit_note(holiday: Holiday) -> str:
    """Note attached to the credit a worked-through holiday produces."""
    return f"Credit from {holiday.name}"


def build_holiday_credit(holiday: Holiday, created_by: str | None) -> HolidayCredit:
    """One credit day for a holiday that was not taken."""
    return HolidayCredit(
        engagement_id=holiday.engagement_id,
        date=holiday.date,
        credit_days=1,
        note=credit_note(holiday),
        created_by=created_by,
    )


async def save_holidays(
    db: AsyncSession, holidays: list[Holiday], created_by: str | None
) -> HolidayBulkResponse:
    """Insert holidays plus a credit for each one not taken."""
    credits = [build_holiday_credit(h, created_by) for h in holidays if not h.is_taken]

    db.add_all(holidays + credits)
    await db.commit()
    for holiday in holidays:
        await db.refresh(holiday)

    return HolidayBulkResponse(
        holidays=[HolidayResponse.model_validate(h) for h in holidays],
        credits_created=len(credits),
    )


@router.get("/holidays", response_model=List[HolidayResponse])
async def get_holidays(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    result = await db.execute(select(Holiday).order_by(Holiday.created_at.desc()))
    return result.scalars().all()


@router.post("/holidays", response_model=HolidayResponse, status_code=201)
async def create_holiday(
    data: HolidayCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Add a single holiday to an engagement."""
    await ensure_id_free(db, Holiday, data.id, "Holiday")
    await get_or_404(db, Engagement, data.engagement_id, "Engagement")

    holiday = Holiday(**data.model_dump(exclude_none=True))
    created = await save_holidays(db, [holiday], admin.id)
    return created.holidays[0]


@router.post("/holidays/range", response_model=HolidayBulkResponse, status_code=201)
async def create_holiday_range(
    data: HolidayRangeCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Add a multi-day holiday.

    Creates one holiday per calendar day from startDate through endDate,
    both inclusive.
    """
    await get_or_404(db, Engagement, data.engagement_id, "Engagement")

    span = (data.end_date - data.start_date).days + 1
    holidays = [
        Holiday(
            engagement_id=data.engagement_id,
            date=data.start_date + timedelta(days=offset),
            name=data.name,
            is_taken=data.is_taken,
        )
        for offset in range(span)
    ]
    return await save_holidays(db, holidays, admin.id)


@router.post("/holidays/bulk", response_model=HolidayBulkResponse, status_code=201)
async def create_holidays_bulk(
    data: HolidayBulkCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Import a list of holidays, possibly spanning several engagements."""
    engagement_ids = set()
    for item in data.holidays:
        engagement_id = item.engagement_id or data.engagement_id
        if engagement_id is None:
            raise ValidationError(f"Holiday '{item.name}' has no engagementId")
        engagement_ids.add(engagement_id)

    for engagement_id in engagement_ids:
        await get_or_404(db, Engagement, engagement_id, "Engagement")

    holidays = [
        Holiday(
            engagement_id=item.engagement_id or data.engagement_id,
            date=item.date,
            name=item.name,
            is_taken=item.is_taken,
        )
        for item in data.holidays
    ]
    return await save_holidays(db, holidays, admin.id)


@router.put("/holidays/{holiday_id}", response_model=HolidayResponse)
async def update_holiday(
    holiday_id: str,
    data: HolidayUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Plain field update; use toggle-taken to keep credits in sync."""
    holiday = await get_or_404(db, Holiday, holiday_id, "Holiday")
    if data.engagement_id is not None:
        await get_or_404(db, Engagement, data.engagement_id, "Engagement")

    apply_updates(holiday, data)
    await db.commit()
    await db.refresh(holiday)
    return holiday


@router.post("/holidays/{holiday_id}/toggle-taken", response_model=HolidayResponse)
async def toggle_holiday_taken(
    holiday_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Flip a holiday between taken and not taken.

    Not taken: record a one-day credit noted "Credit from <name>".
    Taken: delete that credit again if it exists.
    """
    holiday = await get_or_404(db, Holiday, holiday_id, "Holiday")
    holiday.is_taken = not holiday.is_taken

    if not holiday.is_taken:
        db.add(build_holiday_credit(holiday, admin.id))
    else:
        result = await db.execute(
            select(HolidayCredit)
            .where(HolidayCredit.engagement_id == holiday.engagement_id)
            .where(HolidayCredit.date == holiday.date)
            .where(HolidayCredit.note == credit_note(holiday))
        )
        credit = result.scalars().first()
        if credit is not None:
            await db.delete(credit)

    await db.commit()
    await db.refresh(holiday)
    return holiday


@router.delete("/holidays/{holiday_id}")
async def delete_holiday(
    holiday_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    holiday = await get_or_404(db, Holiday, holiday_id, "Holiday")
    await db.delete(holiday)
    await db.commit()
    return {"success": True}
