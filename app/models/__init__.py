"""
SQLAlchemy models package.
All models inherit from the Base class defined in database.py.
"""

from app.models.user import User
from app.models.session import Session
from app.models.developer import Developer
from app.models.client import Client
from app.models.engagement import Engagement
from app.models.day_off import DayOffRequest
from app.models.holiday import Holiday, HolidayCredit
from app.models.invoice import Invoice

__all__ = [
    "User",
    "Session",
    "Developer",
    "Client",
    "Engagement",
    "DayOffRequest",
    "Holiday",
    "HolidayCredit",
    "Invoice",
]
