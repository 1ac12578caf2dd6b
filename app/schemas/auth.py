"""
Pydantic schemas for Authentication.
"""

from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    """Request model for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class SessionUser(BaseSchema):
    """The signed-in user as returned by login and /auth/me."""

    id: str
    email: str
    full_name: str
    role: str


class LoginResponse(BaseSchema):
    """Response model for successful login."""

    success: bool = True
    user: SessionUser


class AuthMeResponse(BaseSchema):
    """Response for GET /auth/me - user is null when signed out."""

    user: Optional[SessionUser] = None
