"""
Session service for cookie-based authentication.

Sessions live in the sessions table. The cookie carries only the session id;
the row holds the signed-in user's id and role.
"""

import json
import secrets
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models.session import Session
from app.models.user import User


class SessionService:
    """Creates, resolves and destroys login sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.settings = get_settings()

    def _generate_session_id(self) -> str:
        """Generate a secure random session ID."""
        return secrets.token_urlsafe(32)

    def _get_expiry_timestamp(self) -> int:
        """Get expiry timestamp in milliseconds."""
        expiry = datetime.utcnow() + timedelta(seconds=self.settings.session_max_age)
        return int(expiry.timestamp() * 1000)

    async def create_session(self, user: User) -> str:
        """
        Create a new session for a user.

        Returns the session ID to be set in the cookie.
        """
        session_id = self._generate_session_id()
        session = Session(
            sid=session_id,
            sess=json.dumps({"user_id": user.id, "email": user.email, "role": user.role}),
            expired=self._get_expiry_timestamp(),
        )

        self.db.add(session)
        await self.db.commit()

        return session_id

    async def get_session(self, session_id: str) -> Optional[Session]:
        """
        Get a session by ID.

        Returns None if session doesn't exist or is expired.
        """
        result = await self.db.execute(select(Session).where(Session.sid == session_id))
        session = result.scalar_one_or_none()

        if session and session.is_expired:
            await self.delete_session(session_id)
            return None

        return session

    async def get_user_from_session(self, session_id: str) -> Optional[User]:
        """Load the user a session belongs to, or None."""
        session = await self.get_session(session_id)
        if not session or not session.user_id:
            return None

        result = await self.db.execute(select(User).where(User.id == session.user_id))
        return result.scalar_one_or_none()

    async def delete_session(self, session_id: str) -> bool:
        """Delete a session."""
        result = await self.db.execute(delete(Session).where(Session.sid == session_id))
        await self.db.commit()
        return result.rowcount > 0

    async def cleanup_expired_sessions(self) -> int:
        """
        Delete all expired sessions.

        Returns the number of sessions deleted.
        """
        current_time_ms = int(datetime.utcnow().timestamp() * 1000)
        result = await self.db.execute(delete(Session).where(Session.expired < current_time_ms))
        await self.db.commit()
        return result.rowcount
