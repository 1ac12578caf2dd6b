"""
Session model.
Maps to the sessions table backing cookie authentication.
"""

import json
from datetime import datetime
from typing import Any

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Session(Base):
    """Server-side session: a JSON payload keyed by the cookie's session id."""

    __tablename__ = "sessions"

    sid: Mapped[str] = mapped_column(String(255), primary_key=True)
    sess: Mapped[str] = mapped_column(Text, nullable=False)  # JSON blob
    expired: Mapped[int] = mapped_column(BigInteger, nullable=False)  # Unix timestamp ms

    @property
    def session_data(self) -> dict[str, Any]:
        """Parse session data from JSON."""
        try:
            return json.loads(self.sess)
        except json.JSONDecodeError:
            return {}

    @property
    def is_expired(self) -> bool:
        """Check if session has expired."""
        return self.expired < int(datetime.utcnow().timestamp() * 1000)

    @property
    def user_id(self) -> str | None:
        """Get the signed-in user's id, if present."""
        return self.session_data.get("user_id")

    def __repr__(self) -> str:
        return f"<Session {self.sid[:8]}...>"
