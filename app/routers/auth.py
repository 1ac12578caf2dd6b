"""
Authentication API router.
Handles login, logout and session lookup.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.database import get_db
from app.exceptions import UnauthorizedError
from app.middleware.auth import get_current_user_optional, get_session_id
from app.models.user import User
from app.schemas.auth import AuthMeResponse, LoginRequest, LoginResponse, SessionUser
from app.services.auth import verify_password
from app.services.session import SessionService

router = APIRouter()


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """
    Authenticate user with email and password.

    Creates a session and sets the session cookie.
    """
    settings = get_settings()

    result = await db.execute(select(User).where(User.email == data.email))
    user = result.scalar_one_or_none()

    if not user or not verify_password(data.password, user.password_hash):
        raise UnauthorizedError("Invalid email or password")

    session_service = SessionService(db)
    session_id = await session_service.create_session(user)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
        path="/",
    )

    return LoginResponse(success=True, user=SessionUser.model_validate(user))


@router.post("/auth/logout")
async def logout(
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Log out the current user.

    Destroys the session and clears the cookie.
    """
    if session_id:
        session_service = SessionService(db)
        await session_service.delete_session(session_id)

    response.delete_cookie(key=get_settings().session_cookie_name, path="/")

    return {"success": True}


@router.get("/auth/me", response_model=AuthMeResponse)
async def get_current_session(
    user: Optional[User] = Depends(get_current_user_optional),
):
    """Return the signed-in user, or { user: null }."""
    if user is None:
        return AuthMeResponse(user=None)
    return AuthMeResponse(user=SessionUser.model_validate(user))
