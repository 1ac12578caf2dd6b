"""
Day-off requests API router.

Developers file requests for their own engagements; admins see everything
and move requests through approval. Only client_approved requests are
deducted on invoices.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import ForbiddenError, ValidationError
from app.middleware.auth import get_current_user, require_admin
from app.models.day_off import DayOffRequest
from app.models.engagement import Engagement
from app.models.user import User
from app.schemas.day_off import (
    DayOffRequestCreate,
    DayOffRequestResponse,
    DayOffRequestUpdate,
)
from app.services.auth import get_user_developer_id
from app.services.lookups import apply_updates, ensure_id_free, get_or_404
from app.services.periods import calculate_days

router = APIRouter()

REVIEW_STATUSES = {"client_approved", "client_rejected"}


def _check_dates(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise ValidationError("endDate must not be before startDate")


@router.get("/day-off-requests", response_model=List[DayOffRequestResponse])
async def get_day_off_requests(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List day-off requests, newest first.

    Admins see all requests; everyone else only those of their own
    developer profile (none if they have no profile).
    """
    query = select(DayOffRequest).order_by(DayOffRequest.created_at.desc())

    if not current_user.is_admin:
        developer_id = await get_user_developer_id(db, current_user.id)
        if developer_id is None:
            return []
        query = query.where(DayOffRequest.developer_id == developer_id)

    result = await db.execute(query)
    return result.scalars().all()


@router.post("/day-off-requests", response_model=DayOffRequestResponse, status_code=201)
async def create_day_off_request(
    data: DayOffRequestCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    File a day-off request against an engagement.

    Non-admins may only file for engagements of their own developer profile.
    The day count is derived from the inclusive date range.
    """
    _check_dates(data.start_date, data.end_date)
    await ensure_id_free(db, DayOffRequest, data.id, "Day-off request")
    engagement = await get_or_404(db, Engagement, data.engagement_id, "Engagement")

    if not current_user.is_admin:
        developer_id = await get_user_developer_id(db, current_user.id)
        if developer_id is None or developer_id != engagement.developer_id:
            raise ForbiddenError("You can only request days off for yourself")

    request = DayOffRequest(
        **data.model_dump(exclude_none=True),
        developer_id=engagement.developer_id,
        client_id=engagement.client_id,
        days=calculate_days(data.start_date, data.end_date),
        submitted_by=current_user.id,
    )

    db.add(request)
    await db.commit()
    await db.refresh(request)
    return request


@router.put("/day-off-requests/{request_id}", response_model=DayOffRequestResponse)
async def update_day_off_request(
    request_id: str,
    data: DayOffRequestUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Update a request, including approving or rejecting it.

    The reviewer is recorded when the status moves to an approval decision.
    """
    request = await get_or_404(db, DayOffRequest, request_id, "Day-off request")

    changes = apply_updates(request, data)
    _check_dates(request.start_date, request.end_date)

    if "start_date" in changes or "end_date" in changes:
        request.days = calculate_days(request.start_date, request.end_date)
    if changes.get("status") in REVIEW_STATUSES:
        request.reviewed_by = admin.id

    await db.commit()
    await db.refresh(request)
    return request


@router.delete("/day-off-requests/{request_id}")
async def delete_day_off_request(
    request_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Administrative delete."""
    request = await get_or_404(db, DayOffRequest, request_id, "Day-off request")
    await db.delete(request)
    await db.commit()
    return {"success": True}
