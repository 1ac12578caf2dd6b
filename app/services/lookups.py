"""
Small persistence helpers shared by the CRUD routers.
"""

from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import ConflictError, NotFoundError

ModelT = TypeVar("ModelT", bound=Base)


async def get_or_404(db: AsyncSession, model: type[ModelT], resource_id: str, resource: str) -> ModelT:
    """Load a row by primary key or raise NotFoundError."""
    instance = await db.get(model, resource_id)
    if instance is None:
        raise NotFoundError(resource, resource_id)
    return instance


async def ensure_id_free(db: AsyncSession, model: type[ModelT], resource_id: str | None, resource: str) -> None:
    """Reject a client-chosen id that is already taken."""
    if resource_id is not None and await db.get(model, resource_id) is not None:
        raise ConflictError(f"{resource} already exists (id={resource_id})")


def apply_updates(instance: Any, data: BaseModel, exclude: set[str] | None = None) -> dict[str, Any]:
    """
    Copy the fields a client actually sent onto a model instance.

    Returns the applied changes so callers can react to specific fields.
    """
    changes = data.model_dump(exclude_unset=True, exclude=exclude)
    for field, value in changes.items():
        setattr(instance, field, value)
    return changes
