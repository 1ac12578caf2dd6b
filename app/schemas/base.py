"""
Base schema classes with custom serialization.

The HTTP API speaks camelCase (``engagementId``, ``section2ClientInvoice``)
while models and services use snake_case. BaseSchema generates the camelCase
aliases and accepts either spelling on input.

Dates are serialized as plain ``YYYY-MM-DD`` strings (month keys come out as
``YYYY-MM-01``). Timestamps are stored as naive UTC and serialized with a
trailing ``Z``.
"""

from datetime import date, datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def serialize_datetime_utc(dt: datetime | None) -> str | None:
    """Serialize a timestamp as ISO-8601 UTC with millisecond precision."""
    if dt is None:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)

    formatted = dt.strftime("%Y-%m-%dT%H:%M:%S")
    ms = dt.microsecond // 1000
    return f"{formatted}.{ms:03d}Z"


def serialize_date_simple(d: date | None) -> str | None:
    """Serialize date as simple ISO date string (YYYY-MM-DD)."""
    if d is None:
        return None
    return d.isoformat()


# Annotated types for Pydantic v2 serialization
DateTimeUTC = Annotated[datetime, PlainSerializer(serialize_datetime_utc, return_type=str)]
DateSimple = Annotated[date, PlainSerializer(serialize_date_simple, return_type=str)]


class BaseSchema(BaseModel):
    """
    Base schema class with standard configuration.
    Use DateTimeUTC or DateSimple types for temporal fields.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
