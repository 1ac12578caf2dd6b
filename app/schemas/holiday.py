"""
Pydantic schemas for Holidays and Holiday Credits.
"""

from datetime import date as date_type
from typing import List, Optional

from pydantic import Field, model_validator

from app.schemas.base import BaseSchema, DateSimple, DateTimeUTC

MAX_RANGE_DAYS = 366


class HolidayResponse(BaseSchema):
    id: str
    engagement_id: str
    date: DateSimple
    name: str
    is_taken: bool
    created_at: DateTimeUTC


class HolidayCreate(BaseSchema):
    id: Optional[str] = Field(None, max_length=64)
    engagement_id: str
    date: date_type
    name: str = Field(..., min_length=1, max_length=200)
    is_taken: bool = False


class HolidayUpdate(BaseSchema):
    engagement_id: Optional[str] = None
    date: Optional[date_type] = None
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    is_taken: Optional[bool] = None


class HolidayBulkItem(BaseSchema):
    """One entry of a bulk holiday import; engagementId falls back to the request's."""

    date: date_type
    name: str = Field(..., min_length=1, max_length=200)
    is_taken: bool = False
    engagement_id: Optional[str] = None


class HolidayBulkCreate(BaseSchema):
    engagement_id: Optional[str] = None
    holidays: List[HolidayBulkItem] = Field(..., min_length=1)


class HolidayRangeCreate(BaseSchema):
    """One holiday per calendar day from startDate through endDate, all sharing a name."""

    engagement_id: str
    name: str = Field(..., min_length=1, max_length=200)
    start_date: date_type
    end_date: date_type
    is_taken: bool = False

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        if (self.end_date - self.start_date).days >= MAX_RANGE_DAYS:
            raise ValueError(f"A holiday range may span at most {MAX_RANGE_DAYS} days")
        return self


class HolidayBulkResponse(BaseSchema):
    holidays: List[HolidayResponse]
    credits_created: int


class HolidayCreditResponse(BaseSchema):
    id: str
    engagement_id: str
    date: DateSimple
    credit_days: float
    note: Optional[str] = None
    created_by: Optional[str] = None
    created_at: DateTimeUTC


class HolidayCreditCreate(BaseSchema):
    id: Optional[str] = Field(None, max_length=64)
    engagement_id: str
    date: date_type
    credit_days: float = Field(1, gt=0)
    note: Optional[str] = None


class HolidayCreditUpdate(BaseSchema):
    date: Optional[date_type] = None
    credit_days: Optional[float] = Field(None, gt=0)
    note: Optional[str] = None
