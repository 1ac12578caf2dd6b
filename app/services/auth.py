"""
Password hashing and role helpers shared by the auth router and middleware.
"""

import logging
from typing import Optional

import bcrypt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.developer import Developer
from app.models.engagement import Engagement

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=12)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against its bcrypt hash; malformed hashes never match."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


async def get_user_developer_id(db: AsyncSession, user_id: str) -> Optional[str]:
    """Id of the developer profile linked to a user, if any."""
    result = await db.execute(select(Developer.id).where(Developer.user_id == user_id))
    return result.scalars().first()


async def get_developer_engagement_ids(db: AsyncSession, developer_id: str) -> list[str]:
    """Ids of every engagement of a developer."""
    result = await db.execute(
        select(Engagement.id).where(Engagement.developer_id == developer_id)
    )
    return list(result.scalars().all())
