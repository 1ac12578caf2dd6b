"""Tests for health check endpoints."""

from unittest.mock import MagicMock

import pytest


@pytest.mark.asyncio
async def test_health_endpoint(app_client, mock_db_session):
    """Health endpoint returns 200 with expected fields."""
    mock_db_session.execute.return_value = MagicMock()

    response = await app_client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert "version" in data
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_health_reports_database_error(app_client, mock_db_session):
    mock_db_session.execute.side_effect = ConnectionError("refused")

    response = await app_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["database"] == "error: refused"
