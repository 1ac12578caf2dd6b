"""Initial schema

Revision ID: 0001
Revises:
Create Date: 2024-03-01 00:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("full_name", sa.String(200), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            "role IN ('admin', 'employee', 'client_approver')",
            name="users_role_check",
        ),
    )

    op.create_table(
        "sessions",
        sa.Column("sid", sa.String(255), primary_key=True),
        sa.Column("sess", sa.Text(), nullable=False),
        sa.Column("expired", sa.BigInteger(), nullable=False),
    )

    op.create_table(
        "developers",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "user_id",
            sa.String(64),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "clients",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "primary_contact_user_id",
            sa.String(64),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "engagements",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "developer_id",
            sa.String(64),
            sa.ForeignKey("developers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "client_id",
            sa.String(64),
            sa.ForeignKey("clients.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("price_per_period", sa.Float(), nullable=False),
        sa.Column("salary_per_period", sa.Float(), nullable=False),
        sa.Column("client_dayoff_rate", sa.Float(), nullable=False),
        sa.Column("dev_dayoff_rate", sa.Float(), nullable=False),
        sa.Column("period_unit", sa.String(10), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            "period_unit IN ('month', 'week')", name="engagements_period_unit_check"
        ),
        sa.CheckConstraint(
            "price_per_period >= 0 AND salary_per_period >= 0 "
            "AND client_dayoff_rate >= 0 AND dev_dayoff_rate >= 0",
            name="engagements_rates_non_negative",
        ),
    )

    op.create_table(
        "day_off_requests",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "engagement_id",
            sa.String(64),
            sa.ForeignKey("engagements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "developer_id",
            sa.String(64),
            sa.ForeignKey("developers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "client_id",
            sa.String(64),
            sa.ForeignKey("clients.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("days", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("submitted_by", sa.String(64), nullable=True),
        sa.Column("reviewed_by", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            "status IN ('draft', 'submitted', 'client_approved', 'client_rejected', 'cancelled')",
            name="day_off_requests_status_check",
        ),
    )
    op.create_index(
        "ix_day_off_requests_engagement_id", "day_off_requests", ["engagement_id"]
    )

    op.create_table(
        "holidays",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "engagement_id",
            sa.String(64),
            sa.ForeignKey("engagements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("is_taken", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_holidays_engagement_date", "holidays", ["engagement_id", "date"])

    op.create_table(
        "holiday_credits",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "engagement_id",
            sa.String(64),
            sa.ForeignKey("engagements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("credit_days", sa.Float(), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(
        "ix_holiday_credits_engagement_date", "holiday_credits", ["engagement_id", "date"]
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("engagement_id", sa.String(64), nullable=False),
        sa.Column("month", sa.Date(), nullable=False),
        sa.Column("approved_days", sa.Integer(), nullable=False),
        sa.Column("credit_days", sa.Float(), nullable=False),
        sa.Column("billable_deduction_days", sa.Float(), nullable=False),
        sa.Column("section2_client_invoice", sa.Float(), nullable=False),
        sa.Column("section3_dev_pay", sa.Float(), nullable=False),
        sa.Column("section1_company_net", sa.Float(), nullable=False),
        sa.Column("price_per_period", sa.Float(), nullable=False),
        sa.Column("salary_per_period", sa.Float(), nullable=False),
        sa.Column("client_dayoff_rate", sa.Float(), nullable=False),
        sa.Column("dev_dayoff_rate", sa.Float(), nullable=False),
        sa.Column("period_unit", sa.String(10), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint(
            "engagement_id", "month", name="invoices_engagement_month_unique"
        ),
    )
    op.create_index("ix_invoices_engagement_id", "invoices", ["engagement_id"])


def downgrade() -> None:
    op.drop_index("ix_invoices_engagement_id", table_name="invoices")
    op.drop_table("invoices")
    op.drop_index("ix_holiday_credits_engagement_date", table_name="holiday_credits")
    op.drop_table("holiday_credits")
    op.drop_index("ix_holidays_engagement_date", table_name="holidays")
    op.drop_table("holidays")
    op.drop_index("ix_day_off_requests_engagement_id", table_name="day_off_requests")
    op.drop_table("day_off_requests")
    op.drop_table("engagements")
    op.drop_table("clients")
    op.drop_table("developers")
    op.drop_table("sessions")
    op.drop_table("users")
