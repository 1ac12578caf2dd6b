"""
Developers API router.
Admin-only CRUD for developer profiles.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.middleware.auth import require_admin
from app.models.developer import Developer
from app.models.user import User
from app.schemas.developer import DeveloperCreate, DeveloperResponse, DeveloperUpdate
from app.services.lookups import apply_updates, ensure_id_free, get_or_404

router = APIRouter()


async def _check_user(db: AsyncSession, user_id: str | None) -> None:
    if user_id is not None:
        await get_or_404(db, User, user_id, "User")


@router.get("/developers", response_model=List[DeveloperResponse])
async def get_developers(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """List all developers, newest first."""
    result = await db.execute(select(Developer).order_by(Developer.created_at.desc()))
    return result.scalars().all()


@router.post("/developers", response_model=DeveloperResponse, status_code=201)
async def create_developer(
    data: DeveloperCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Create a developer, optionally linked to a login."""
    await ensure_id_free(db, Developer, data.id, "Developer")
    await _check_user(db, data.user_id)

    developer = Developer(**data.model_dump(exclude_none=True))
    db.add(developer)
    await db.commit()
    await db.refresh(developer)
    return developer


@router.put("/developers/{developer_id}", response_model=DeveloperResponse)
async def update_developer(
    developer_id: str,
    data: DeveloperUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    developer = await get_or_404(db, Developer, developer_id, "Developer")
    await _check_user(db, data.user_id)

    apply_updates(developer, data)
    await db.commit()
    await db.refresh(developer)
    return developer


@router.delete("/developers/{developer_id}")
async def delete_developer(
    developer_id: str,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Delete a developer together with their engagements."""
    developer = await get_or_404(db, Developer, developer_id, "Developer")
    await db.delete(developer)
    await db.commit()
    return {"success": True}
