"""
API routers package.
"""

from app.routers import (
    auth,
    clients,
    day_off_requests,
    developers,
    engagements,
    health,
    holiday_credits,
    holidays,
    invoices,
    users,
)

__all__ = [
    "auth",
    "clients",
    "day_off_requests",
    "developers",
    "engagements",
    "health",
    "holiday_credits",
    "holidays",
    "invoices",
    "users",
]
