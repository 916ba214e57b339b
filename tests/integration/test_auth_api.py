"""Integration tests for auth API endpoints"""

import pytest
from httpx import AsyncClient

from splitbill.models.user import User


def registration(**overrides):
    data = {
        "username": "newdiner",
        "email": "newdiner@example.com",
        "password": "SecurePass123!",
        "full_name": "New Diner",
    }
    data.update(overrides)
    return data


class TestRegisterEndpoint:
    """Test user registration endpoint"""

    @pytest.mark.asyncio
    async def test_register_success(self, client: AsyncClient):
        """Test successful user registration"""
        response = await client.post("/api/v1/auth/register", json=registration())

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "newdiner"
        assert data["email"] == "newdiner@example.com"
        assert data["is_active"] is True
        assert "hashed_password" not in data
        assert "password" not in data

    @pytest.mark.asyncio
    async def test_register_stores_lowercase_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/register", json=registration(email="NewDiner@Example.com")
        )

        assert response.status_code == 201
        assert response.json()["email"] == "newdiner@example.com"

    @pytest.mark.asyncio
    async def test_register_duplicate_username(self, client: AsyncClient, test_user: User):
        """Test usernames are unique regardless of case"""
        response = await client.post(
            "/api/v1/auth/register", json=registration(username="TestUser")
        )

        assert response.status_code == 409
        assert "already registered" in response.json()["detail"].lower()

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/v1/auth/register", json=registration(email="test@example.com")
        )

        assert response.status_code == 409
        assert "already registered" in response.json()["detail"].lower()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"password": "12345"},
            {"username": "no spaces"},
            {"username": "ab"},
        ],
    )
    async def test_register_invalid_input(self, client: AsyncClient, overrides: dict):
        """Test malformed registrations are rejected before reaching the service"""
        response = await client.post("/api/v1/auth/register", json=registration(**overrides))

        assert response.status_code == 422


class TestLoginEndpoint:
    """Test user login endpoint"""

    @pytest.mark.asyncio
    async def test_login_with_username(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/v1/auth/login",
            data={"username": "testuser", "password": "testpassword123"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["username"] == "testuser"
        assert data["expires_in"] > 0
        assert data["access_token"]

    @pytest.mark.asyncio
    async def test_login_with_email_any_case(self, client: AsyncClient, test_user: User):
        """Test the username field also accepts the email address"""
        response = await client.post(
            "/api/v1/auth/login",
            data={"username": "Test@Example.com", "password": "testpassword123"},
        )

        assert response.status_code == 200
        assert response.json()["username"] == "testuser"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/v1/auth/login",
            data={"username": "testuser", "password": "wrongpassword"},
        )

        assert response.status_code == 401
        assert "incorrect" in response.json()["detail"].lower()

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login",
            data={"username": "nobody", "password": "password123"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_login_missing_credentials(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/login", data={})

        assert response.status_code == 422


class TestCurrentUserEndpoint:
    """Test the profile endpoint"""

    @pytest.mark.asyncio
    async def test_me(self, client: AsyncClient, test_user: User, auth_headers: dict):
        response = await client.get("/api/v1/auth/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(test_user.id)
        assert data["username"] == "testuser"

    @pytest.mark.asyncio
    async def test_me_without_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert "not authenticated" in response.json()["detail"].lower()

    @pytest.mark.asyncio
    async def test_me_with_invalid_token(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/auth/me", headers={"Authorization": "Bearer invalid_token"}
        )

        assert response.status_code == 401


class TestHealth:
    """Test service status endpoints"""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "cache": "up"}

    @pytest.mark.asyncio
    async def test_root(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["version"] == "1.0.0"
