"""
Developer model.
Maps to the developers table in PostgreSQL.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, generate_id

if TYPE_CHECKING:
    from app.models.engagement import Engagement


class Developer(Base):
    """Developer model - a contractor placed with clients through engagements."""

    __tablename__ = "developers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Links the developer to a login so non-admins only see their own data
    user_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    engagements: Mapped[List["Engagement"]] = relationship(
        "Engagement",
        back_populates="developer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Developer {self.name}>"
