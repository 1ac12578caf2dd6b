"""
Demo data for fresh installs.

Inserts an admin user, two developers, two clients and one engagement per
developer, but only when the users table is empty. Safe to run multiple
times.

Usage:
    python -m app.scripts.seed_demo_data

Environment variables:
    INIT_ADMIN_EMAIL            Admin email (default: admin@hr.com)
    INIT_ADMIN_PASSWORD         Admin password (default: auto-generated)
"""

import asyncio
import logging
import secrets
import sys
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.database import get_db_context, init_db
from app.models import Client, Developer, Engagement, User
from app.services.auth import hash_password

logger = logging.getLogger(__name__)

DEMO_DEVELOPERS = (
    ("d1", "Alice Johnson"),
    ("d2", "Bob Smith"),
)

DEMO_CLIENTS = (
    ("c1", "Acme Corp"),
    ("c2", "TechStart Inc"),
)

# id, developer, client, start, price, salary, client day-off rate, dev day-off rate
DEMO_ENGAGEMENTS = (
    ("e1", "d1", "c1", date(2024, 1, 1), 15000, 10000, 750, 500),
    ("e2", "d2", "c2", date(2024, 2, 1), 12000, 8000, 600, 400),
)


def generate_password(length: int = 16) -> str:
    """Generate a secure random password."""
    alphabet = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%"
    return "".join(secrets.choice(alphabet) for _ in range(length))


async def seed_demo_data(session: AsyncSession, settings: Settings | None = None) -> bool:
    """
    Insert the demo records into an empty database.

    Returns True when data was inserted, False when users already exist.
    The caller commits.
    """
    settings = settings or get_settings()

    user_count = await session.scalar(select(func.count()).select_from(User))
    if user_count:
        logger.info("Users already present, skipping demo data")
        return False

    password = settings.init_admin_password
    if not password:
        password = generate_password()
        logger.warning(
            "Admin password was auto-generated for %s: %s "
            "(set INIT_ADMIN_PASSWORD to control it)",
            settings.init_admin_email,
            password,
        )

    session.add(
        User(
            id="1",
            email=settings.init_admin_email,
            full_name="Admin User",
            role="admin",
            password_hash=hash_password(password),
        )
    )
    session.add_all([Developer(id=dev_id, name=name) for dev_id, name in DEMO_DEVELOPERS])
    session.add_all([Client(id=client_id, name=name) for client_id, name in DEMO_CLIENTS])
    # Parents must exist before the engagements referencing them
    await session.flush()

    for eid, developer_id, client_id, start, price, salary, client_rate, dev_rate in DEMO_ENGAGEMENTS:
        session.add(
            Engagement(
                id=eid,
                developer_id=developer_id,
                client_id=client_id,
                start_date=start,
                end_date=None,
                currency="USD",
                price_per_period=price,
                salary_per_period=salary,
                client_dayoff_rate=client_rate,
                dev_dayoff_rate=dev_rate,
                period_unit="month",
                is_active=True,
            )
        )

    await session.flush()
    logger.info(
        "Inserted demo data: %d developers, %d clients, %d engagements",
        len(DEMO_DEVELOPERS),
        len(DEMO_CLIENTS),
        len(DEMO_ENGAGEMENTS),
    )
    return True


async def main():
    """Seed the database configured in the environment."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    try:
        await init_db()
        async with get_db_context() as session:
            await seed_demo_data(session, settings)
    except Exception:
        logger.exception("Seeding demo data failed")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
