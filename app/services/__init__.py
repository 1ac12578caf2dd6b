"""
Services package for business logic.
"""

from app.services.session import SessionService

__all__ = [
    "SessionService",
]
