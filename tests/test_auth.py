"""Tests for authentication endpoints and password hashing."""

from unittest.mock import MagicMock

import pytest

from app.services.auth import hash_password, verify_password


def test_password_hash_round_trip():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_malformed_hash_never_matches():
    assert not verify_password("anything", "not-a-bcrypt-hash")
    assert not verify_password("anything", "")


@pytest.mark.asyncio
async def test_login_missing_fields(app_client):
    """Login with missing fields returns 422 validation error."""
    response = await app_client.post("/api/auth/login", json={})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_unknown_email(app_client, mock_db_session):
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = None
    mock_db_session.execute.return_value = mock_result

    response = await app_client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "secret123"},
    )

    assert response.status_code == 401
    assert "Invalid" in response.json()["detail"]


@pytest.mark.asyncio
async def test_login_wrong_password(app_client, mock_db_session, admin_user):
    admin_user.password_hash = hash_password("right-password")
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = admin_user
    mock_db_session.execute.return_value = mock_result

    response = await app_client.post(
        "/api/auth/login",
        json={"email": "admin@hr.com", "password": "wrong-password"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_sets_session_cookie(app_client, mock_db_session, admin_user):
    admin_user.password_hash = hash_password("right-password")
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = admin_user
    mock_db_session.execute.return_value = mock_result

    response = await app_client.post(
        "/api/auth/login",
        json={"email": "admin@hr.com", "password": "right-password"},
    )

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "admin@hr.com"
    assert "devhr.sid" in response.cookies
    mock_db_session.add.assert_called_once()


@pytest.mark.asyncio
async def test_auth_me_unauthenticated(app_client):
    """GET /auth/me without session returns null user."""
    response = await app_client.get("/api/auth/me")
    assert response.status_code == 200
    assert response.json()["user"] is None


@pytest.mark.asyncio
async def test_auth_me_returns_signed_in_user(app_client, login_as, employee_user):
    login_as(employee_user)
    response = await app_client.get("/api/auth/me")
    assert response.json()["user"]["fullName"] == "Alice Johnson"
    assert response.json()["user"]["role"] == "employee"


@pytest.mark.asyncio
async def test_logout_without_session(app_client):
    """Logout without active session still succeeds."""
    response = await app_client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json()["success"] is True


@pytest.mark.asyncio
async def test_login_empty_password_rejected(app_client):
    response = await app_client.post(
        "/api/auth/login",
        json={"email": "user@example.com", "password": ""},
    )
    assert response.status_code == 422
