"""
Pydantic schemas for Developers and Clients.
"""

from typing import Optional

from pydantic import Field

from app.schemas.base import BaseSchema, DateTimeUTC


class DeveloperResponse(BaseSchema):
    id: str
    name: str
    user_id: Optional[str] = None
    created_at: DateTimeUTC


class DeveloperCreate(BaseSchema):
    id: Optional[str] = Field(None, max_length=64)
    name: str = Field(..., min_length=1, max_length=200)
    user_id: Optional[str] = None


class DeveloperUpdate(BaseSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    user_id: Optional[str] = None


class ClientResponse(BaseSchema):
    id: str
    name: str
    primary_contact_user_id: Optional[str] = None
    created_at: DateTimeUTC


class ClientCreate(BaseSchema):
    id: Optional[str] = Field(None, max_length=64)
    name: str = Field(..., min_length=1, max_length=200)
    primary_contact_user_id: Optional[str] = None


class ClientUpdate(BaseSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    primary_contact_user_id: Optional[str] = None
