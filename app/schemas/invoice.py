"""
Pydantic schemas for Invoices and monthly financials.
"""

from datetime import date
from typing import Optional

from app.schemas.base import BaseSchema, DateSimple, DateTimeUTC
from app.schemas.engagement import Currency, PeriodUnit


class MonthlyFinancialsResponse(BaseSchema):
    """Computed (or reconstructed) financials of one engagement for one month."""

    engagement_id: str
    month: DateSimple
    approved_days: int
    credit_days: float
    billable_deduction_days: float
    section2_client_invoice: float
    section3_dev_pay: float
    section1_company_net: float


class InvoiceResponse(MonthlyFinancialsResponse):
    """A stored invoice: financials plus the engagement rates they were computed with."""

    id: str
    price_per_period: float
    salary_per_period: float
    client_dayoff_rate: float
    dev_dayoff_rate: float
    period_unit: PeriodUnit
    currency: Currency
    created_at: DateTimeUTC


class InvoiceUpsert(BaseSchema):
    """Request model for POST /invoices (insert or replace by engagement and month)."""

    id: Optional[str] = None
    engagement_id: str
    month: date
    approved_days: int = 0
    credit_days: float = 0
    billable_deduction_days: float = 0
    section2_client_invoice: float
    section3_dev_pay: float
    section1_company_net: float
    price_per_period: float
    salary_per_period: float
    client_dayoff_rate: float
    dev_dayoff_rate: float
    period_unit: PeriodUnit
    currency: Currency
