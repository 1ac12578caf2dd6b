"""
Day-off request model.
Maps to the day_off_requests table in PostgreSQL.
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, generate_id

DAY_OFF_TYPES = ("vacation", "sick_leave", "personal", "unpaid")
DAY_OFF_STATUSES = ("draft", "submitted", "client_approved", "client_rejected", "cancelled")

# Only approved requests are deducted from invoices
APPROVED_STATUS = "client_approved"


class DayOffRequest(Base):
    """Day-off request - consecutive calendar days off claimed against one engagement."""

    __tablename__ = "day_off_requests"
    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'submitted', 'client_approved', 'client_rejected', 'cancelled')",
            name="day_off_requests_status_check",
        ),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    engagement_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("engagements.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    developer_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("developers.id", ondelete="CASCADE"),
        nullable=False,
    )
    client_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    days: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[str] = mapped_column(String(20), default="vacation", nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="submitted", nullable=False)
    submitted_by: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    reviewed_by: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    @property
    def is_approved(self) -> bool:
        return self.status == APPROVED_STATUS

    def __repr__(self) -> str:
        return f"<DayOffRequest {self.engagement_id} ({self.start_date} to {self.end_date}, {self.status})>"
