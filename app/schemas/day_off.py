"""
Pydantic schemas for Day-Off Requests.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from app.schemas.base import BaseSchema, DateSimple, DateTimeUTC

DayOffType = Literal["vacation", "sick_leave", "personal", "unpaid"]
DayOffStatus = Literal["draft", "submitted", "client_approved", "client_rejected", "cancelled"]


class DayOffRequestResponse(BaseSchema):
    """Response model for day-off requests."""

    id: str
    engagement_id: str
    developer_id: str
    client_id: str
    start_date: DateSimple
    end_date: DateSimple
    days: int
    type: DayOffType
    reason: Optional[str] = None
    status: DayOffStatus
    submitted_by: Optional[str] = None
    reviewed_by: Optional[str] = None
    created_at: DateTimeUTC
    updated_at: DateTimeUTC


class DayOffRequestCreate(BaseSchema):
    """
    Request model for creating a day-off request.

    Developer and client are taken from the engagement and the day count is
    derived from the dates.
    """

    id: Optional[str] = Field(None, max_length=64)
    engagement_id: str
    start_date: date
    end_date: date
    type: DayOffType = "vacation"
    reason: Optional[str] = None
    status: Literal["draft", "submitted"] = "submitted"


class DayOffRequestUpdate(BaseSchema):
    """Request model for updating (and approving or rejecting) a day-off request."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: Optional[DayOffType] = None
    reason: Optional[str] = None
    status: Optional[DayOffStatus] = None
