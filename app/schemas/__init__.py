"""
Pydantic schemas for request/response validation.
"""

from app.schemas.auth import LoginRequest, LoginResponse, AuthMeResponse, SessionUser
from app.schemas.user import UserResponse, UserCreate, UserUpdate
from app.schemas.developer import (
    DeveloperResponse,
    DeveloperCreate,
    DeveloperUpdate,
    ClientResponse,
    ClientCreate,
    ClientUpdate,
)
from app.schemas.engagement import (
    EngagementResponse,
    EngagementCreate,
    EngagementUpdate,
    CreditBalanceResponse,
)
from app.schemas.day_off import (
    DayOffRequestResponse,
    DayOffRequestCreate,
    DayOffRequestUpdate,
)
from app.schemas.holiday import (
    HolidayResponse,
    HolidayCreate,
    HolidayUpdate,
    HolidayBulkCreate,
    HolidayRangeCreate,
    HolidayBulkResponse,
    HolidayCreditResponse,
    HolidayCreditCreate,
    HolidayCreditUpdate,
)
from app.schemas.invoice import (
    MonthlyFinancialsResponse,
    InvoiceResponse,
    InvoiceUpsert,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "AuthMeResponse",
    "SessionUser",
    "UserResponse",
    "UserCreate",
    "UserUpdate",
    "DeveloperResponse",
    "DeveloperCreate",
    "DeveloperUpdate",
    "ClientResponse",
    "ClientCreate",
    "ClientUpdate",
    "EngagementResponse",
    "EngagementCreate",
    "EngagementUpdate",
    "CreditBalanceResponse",
    "DayOffRequestResponse",
    "DayOffRequestCreate",
    "DayOffRequestUpdate",
    "HolidayResponse",
    "HolidayCreate",
    "HolidayUpdate",
    "HolidayBulkCreate",
    "HolidayRangeCreate",
    "HolidayBulkResponse",
    "HolidayCreditResponse",
    "HolidayCreditCreate",
    "HolidayCreditUpdate",
    "MonthlyFinancialsResponse",
    "InvoiceResponse",
    "InvoiceUpsert",
]
