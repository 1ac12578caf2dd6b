"""
Engagement model.
Maps to the engagements table in PostgreSQL.
"""

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Float,
    ForeignKey,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, generate_id

if TYPE_CHECKING:
    from app.models.client import Client
    from app.models.developer import Developer

CURRENCIES = ("USD", "EUR", "GBP", "IDR")
PERIOD_UNITS = ("month", "week")


class Engagement(Base):
    """
    Engagement model - a time-bounded contract placing one developer with one client.

    Rates are per period_unit: price_per_period is billed to the client,
    salary_per_period is paid to the developer. The two day-off rates are
    deducted per billable day off.
    """

    __tablename__ = "engagements"
    __table_args__ = (
        CheckConstraint("period_unit IN ('month', 'week')", name="engagements_period_unit_check"),
        CheckConstraint(
            "price_per_period >= 0 AND salary_per_period >= 0 "
            "AND client_dayoff_rate >= 0 AND dev_dayoff_rate >= 0",
            name="engagements_rates_non_negative",
        ),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
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
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    currency: Mapped[str] = mapped_column(String(3), default="USD", nullable=False)
    price_per_period: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    salary_per_period: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    client_dayoff_rate: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    dev_dayoff_rate: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    period_unit: Mapped[str] = mapped_column(String(10), default="month", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    # Relationships
    developer: Mapped["Developer"] = relationship("Developer", back_populates="engagements")
    client: Mapped["Client"] = relationship("Client", back_populates="engagements")

    def __repr__(self) -> str:
        return f"<Engagement {self.id} ({self.start_date} to {self.end_date or 'open'})>"
