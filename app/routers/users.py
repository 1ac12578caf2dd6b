"""
Users API router.
Admin-only management of login accounts.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import ConflictError, ValidationError
from app.middleware.auth import require_admin
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.auth import hash_password
from app.services.lookups import apply_updates, ensure_id_free, get_or_404

router = APIRouter()


async def _ensure_email_free(db: AsyncSession, email: str) -> None:
    result = await db.execute(select(User.id).where(User.email == email))
    if result.scalar_one_or_none() is not None:
        raise ConflictError("A user with this email already exists")


@router.get("/users", response_model=List[UserResponse])
async def get_users(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """List all users, newest first."""
    result = await db.execute(select(User).order_by(User.created_at.desc()))
    return result.scalars().all()


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Create a user with a hashed password."""
    await ensure_id_free(db, User, data.id, "User")
    await _ensure_email_free(db, data.email)

    user = User(**data.model_dump(exclude={"password"}, exclude_none=True))
    user.password_hash = hash_password(data.password)

    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Update a user. A new password is re-hashed."""
    user = await get_or_404(db, User, user_id, "User")

    if data.email is not None and data.email != user.email:
        await _ensure_email_free(db, data.email)

    apply_updates(user, data, exclude={"password"})
    if data.password:
        user.password_hash = hash_password(data.password)

    await db.commit()
    await db.refresh(user)
    return user


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Delete a user. Admins cannot delete themselves."""
    if user_id == admin.id:
        raise ValidationError("You cannot delete your own account")

    user = await get_or_404(db, User, user_id, "User")
    await db.delete(user)
    await db.commit()
    return {"success": True}
