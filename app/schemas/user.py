"""
Pydantic schemas for Users.
"""

from typing import Literal, Optional

from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema, DateTimeUTC

Role = Literal["admin", "employee", "client_approver"]


class UserResponse(BaseSchema):
    """Response model for users (password hash never leaves the server)."""

    id: str
    email: str
    full_name: str
    role: Role
    created_at: DateTimeUTC


class UserCreate(BaseSchema):
    """Request model for creating a user."""

    id: Optional[str] = Field(None, max_length=64)
    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=200)
    role: Role = "employee"
    password: str = Field(..., min_length=8)


class UserUpdate(BaseSchema):
    """Request model for updating a user."""

    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[Role] = None
    password: Optional[str] = Field(None, min_length=8)
