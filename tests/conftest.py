"""
Shared test fixtures for the DevHR API test suite.
"""

from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.models import DayOffRequest, Engagement, Holiday, HolidayCredit, User


@pytest.fixture
def test_settings():
    """Settings configured for testing (no real DB connection needed)."""
    return Settings(
        db_host="localhost",
        db_port=5432,
        db_name="devhr_test",
        db_user="test",
        db_password="test",
        session_secret="test-session-secret",
        debug=True,
    )


@pytest.fixture
def mock_db_session():
    """Create a mock async database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock(return_value=None)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


@pytest.fixture
def scalars_result():
    """Build mocks of an execute() result whose .scalars() yields the given items."""

    def _result(items):
        items = list(items)
        result = MagicMock()
        result.scalars.return_value.all.return_value = items
        result.scalars.return_value.first.return_value = items[0] if items else None
        result.scalar_one_or_none.return_value = items[0] if items else None
        return result

    return _result


@pytest.fixture
def admin_user():
    return User(
        id="1",
        email="admin@hr.com",
        full_name="Admin User",
        role="admin",
        password_hash="",
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def employee_user():
    return User(
        id="u2",
        email="alice@example.com",
        full_name="Alice Johnson",
        role="employee",
        password_hash="",
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def make_engagement():
    """Factory for unsaved Engagement rows with the e1 demo rates by default."""

    def _make(id="e1", **overrides):
        values = dict(
            id=id,
            developer_id="d1",
            client_id="c1",
            start_date=date(2024, 1, 1),
            end_date=None,
            currency="USD",
            price_per_period=15000,
            salary_per_period=10000,
            client_dayoff_rate=750,
            dev_dayoff_rate=500,
            period_unit="month",
            is_active=True,
            created_at=datetime(2024, 1, 1),
        )
        values.update(overrides)
        return Engagement(**values)

    return _make


@pytest.fixture
def make_day_off():
    def _make(start, days, engagement_id="e1", status="client_approved", **overrides):
        values = dict(
            id=f"r-{engagement_id}-{start.isoformat()}",
            engagement_id=engagement_id,
            developer_id="d1",
            client_id="c1",
            start_date=start,
            end_date=start,
            days=days,
            type="vacation",
            status=status,
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
        )
        values.update(overrides)
        return DayOffRequest(**values)

    return _make


@pytest.fixture
def make_credit():
    def _make(on, credit_days=1, engagement_id="e1", **overrides):
        values = dict(
            id=f"hc-{engagement_id}-{on.isoformat()}",
            engagement_id=engagement_id,
            date=on,
            credit_days=credit_days,
            note=None,
            created_at=datetime(2024, 1, 1),
        )
        values.update(overrides)
        return HolidayCredit(**values)

    return _make


@pytest.fixture
def make_holiday():
    def _make(on, name="Holiday", is_taken=False, engagement_id="e1", **overrides):
        values = dict(
            id=f"h-{engagement_id}-{on.isoformat()}",
            engagement_id=engagement_id,
            date=on,
            name=name,
            is_taken=is_taken,
            created_at=datetime(2024, 1, 1),
        )
        values.update(overrides)
        return Holiday(**values)

    return _make


@pytest.fixture
def test_app(test_settings, mock_db_session):
    """FastAPI app with the database dependencies pointed at the mock session."""
    with patch("app.config.get_settings", return_value=test_settings):
        # Import after patching settings
        from app.main import create_app

        app = create_app()

    from app.database import get_db, get_db_readonly

    app.dependency_overrides[get_db] = lambda: mock_db_session
    app.dependency_overrides[get_db_readonly] = lambda: mock_db_session
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def app_client(test_app):
    """Create a test client with mocked database dependencies."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def login_as(test_app):
    """Authenticate every following request as ``user``."""
    from app.middleware.auth import get_current_user_optional

    def _login(user):
        test_app.dependency_overrides[get_current_user_optional] = lambda: user

    return _login
