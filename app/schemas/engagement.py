"""
Pydantic schemas for Engagements.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import Field, model_validator

from app.schemas.base import BaseSchema, DateSimple, DateTimeUTC

Currency = Literal["USD", "EUR", "GBP", "IDR"]
PeriodUnit = Literal["month", "week"]


class EngagementResponse(BaseSchema):
    """Response model for engagements."""

    id: str
    developer_id: str
    client_id: str
    start_date: DateSimple
    end_date: Optional[DateSimple] = None
    currency: Currency
    price_per_period: float
    salary_per_period: float
    client_dayoff_rate: float
    dev_dayoff_rate: float
    period_unit: PeriodUnit
    is_active: bool
    created_at: DateTimeUTC


class EngagementCreate(BaseSchema):
    """Request model for creating an engagement. Rates may not be negative."""

    id: Optional[str] = Field(None, max_length=64)
    developer_id: str
    client_id: str
    start_date: date
    end_date: Optional[date] = None
    currency: Currency = "USD"
    price_per_period: float = Field(..., ge=0)
    salary_per_period: float = Field(..., ge=0)
    client_dayoff_rate: float = Field(0, ge=0)
    dev_dayoff_rate: float = Field(0, ge=0)
    period_unit: PeriodUnit = "month"
    is_active: bool = True

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class EngagementUpdate(BaseSchema):
    """Request model for updating an engagement."""

    developer_id: Optional[str] = None
    client_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    currency: Optional[Currency] = None
    price_per_period: Optional[float] = Field(None, ge=0)
    salary_per_period: Optional[float] = Field(None, ge=0)
    client_dayoff_rate: Optional[float] = Field(None, ge=0)
    dev_dayoff_rate: Optional[float] = Field(None, ge=0)
    period_unit: Optional[PeriodUnit] = None
    is_active: Optional[bool] = None


class CreditBalanceResponse(BaseSchema):
    """Running credit balance of an engagement since its start date."""

    engagement_id: str
    explicit_credit_days: float
    holiday_credit_days: int
    total_credit_days: float
    approved_days: int
    balance: float
