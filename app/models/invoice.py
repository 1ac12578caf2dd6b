"""
Invoice model.
Maps to the invoices table in PostgreSQL.
"""

from datetime import date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Invoice(Base):
    """
    Invoice model - the frozen financials of one engagement for one closed month.

    Besides the computed sections it snapshots the engagement's rates so the
    invoice stays explainable after the engagement is edited.
    """

    __tablename__ = "invoices"
    __table_args__ = (
        UniqueConstraint("engagement_id", "month", name="invoices_engagement_month_unique"),
    )

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    # No foreign key: invoices outlive the engagement they were cut for
    engagement_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    month: Mapped[date] = mapped_column(Date, nullable=False)
    approved_days: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    credit_days: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    billable_deduction_days: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    section2_client_invoice: Mapped[float] = mapped_column(Float, nullable=False)
    section3_dev_pay: Mapped[float] = mapped_column(Float, nullable=False)
    section1_company_net: Mapped[float] = mapped_column(Float, nullable=False)

    # Snapshot of engagement data at time of invoice generation
    price_per_period: Mapped[float] = mapped_column(Float, nullable=False)
    salary_per_period: Mapped[float] = mapped_column(Float, nullable=False)
    client_dayoff_rate: Mapped[float] = mapped_column(Float, nullable=False)
    dev_dayoff_rate: Mapped[float] = mapped_column(Float, nullable=False)
    period_unit: Mapped[str] = mapped_column(String(10), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Invoice {self.engagement_id} {self.month}>"
