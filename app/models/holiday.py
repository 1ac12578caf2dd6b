"""
Holiday and HolidayCredit models.
Maps to the holidays and holiday_credits tables in PostgreSQL.
"""

from datetime import date as date_type, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, generate_id


class Holiday(Base):
    """
    Holiday model - a public or company holiday on one engagement.

    A holiday the developer worked through (is_taken false) earns one credit
    day unless an explicit HolidayCredit already exists for the same date.
    """

    __tablename__ = "holidays"
    __table_args__ = (Index("ix_holidays_engagement_date", "engagement_id", "date"),)

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    engagement_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("engagements.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_taken: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Holiday {self.name} ({self.date})>"


class HolidayCredit(Base):
    """Holiday credit - days granted to an engagement that offset approved days off."""

    __tablename__ = "holiday_credits"
    __table_args__ = (Index("ix_holiday_credits_engagement_date", "engagement_id", "date"),)

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    engagement_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("engagements.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    credit_days: Mapped[float] = mapped_column(Float, default=1, nullable=False)
    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_by: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<HolidayCredit {self.engagement_id} {self.date} (+{self.credit_days})>"
