"""
Authentication middleware and dependencies.

Provides FastAPI dependencies for protecting routes with authentication
and role-based access control.
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.database import get_db
from app.exceptions import ForbiddenError, UnauthorizedError
from app.models.user import User
from app.services.session import SessionService


async def get_session_id(request: Request) -> Optional[str]:
    """Extract session ID from the session cookie."""
    return request.cookies.get(get_settings().session_cookie_name) or None


async def get_current_user_optional(
    session_id: Optional[str] = Depends(get_session_id),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """
    Get current user if authenticated, None otherwise.

    Use this for routes that work both authenticated and anonymous.
    """
    if not session_id:
        return None

    session_service = SessionService(db)
    return await session_service.get_user_from_session(session_id)


async def get_current_user(
    user: Optional[User] = Depends(get_current_user_optional),
) -> User:
    """
    Get current authenticated user.

    Raises 401 if not authenticated.
    """
    if not user:
        raise UnauthorizedError()
    return user


async def require_admin(
    user: User = Depends(get_current_user),
) -> User:
    """
    Require admin role.

    Raises 403 if user is not an admin.
    """
    if not user.is_admin:
        raise ForbiddenError()
    return user
