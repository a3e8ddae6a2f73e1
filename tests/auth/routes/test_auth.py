import pytest

from app.auth.models.user import User
from tests.utils.factories import create_user_factory
from tests.utils.helpers import (
    assert_error_envelope,
    assert_user_response_valid,
    set_access_token_cookie,
)


class TestRegisterEndpoint:
    @pytest.mark.asyncio
    async def test_should_create_customer(self, test_client, db_session):
        payload = {"email": "New.User@Example.com", "name": "New User", "password": "Password123"}

        response = await test_client.post("/api/v1/auth/register", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert_user_response_valid(data)
        assert data["email"] == "new.user@example.com"
        assert data["role"] == "customer"

        user = db_session.query(User).filter(User.email == "new.user@example.com").first()
        assert user is not None
        assert user.hashed_password != "Password123"

    @pytest.mark.asyncio
    async def test_should_return_409_when_email_taken(self, test_client, test_customer):
        payload = {"email": test_customer.email, "name": "Dup", "password": "Password123"}

        response = await test_client.post("/api/v1/auth/register", json=payload)

        assert response.status_code == 409
        assert_error_envelope(response.json(), "CONFLICT")

    @pytest.mark.asyncio
    async def test_should_return_422_when_password_too_short(self, test_client):
        payload = {"email": "short@example.com", "name": "Short", "password": "short"}

        response = await test_client.post("/api/v1/auth/register", json=payload)

        assert response.status_code == 422


class TestLoginEndpoint:
    @pytest.mark.asyncio
    async def test_should_set_cookie_when_valid_credentials(self, test_client, test_staff):
        payload = {"email": test_staff.email, "password": "staffpass123"}

        response = await test_client.post("/api/v1/auth/login", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["email"] == test_staff.email
        assert data["user"]["role"] == "staff"
        assert "access_token" in response.cookies

    @pytest.mark.asyncio
    async def test_should_return_401_when_email_not_found(self, test_client):
        payload = {"email": "nobody@example.com", "password": "testpass123"}

        response = await test_client.post("/api/v1/auth/login", json=payload)

        assert response.status_code == 401
        assert "Invalid email or password" in response.json()["error"]["message"]

    @pytest.mark.asyncio
    async def test_should_return_401_when_password_wrong(self, test_client, test_staff):
        payload = {"email": test_staff.email, "password": "wrongpass123"}

        response = await test_client.post("/api/v1/auth/login", json=payload)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_should_return_403_when_inactive(self, test_client, db_session):
        create_user_factory(
            db_session, email="inactive@example.com", password="testpass123", is_active=False
        )
        payload = {"email": "inactive@example.com", "password": "testpass123"}

        response = await test_client.post("/api/v1/auth/login", json=payload)

        assert response.status_code == 403
        assert_error_envelope(response.json(), "FORBIDDEN")


class TestMeAndLogout:
    @pytest.mark.asyncio
    async def test_me_returns_current_user(self, test_client, test_admin, test_admin_token):
        set_access_token_cookie(test_client, test_admin_token)

        response = await test_client.get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["id"] == str(test_admin.id)
        assert response.json()["role"] == "admin"

    @pytest.mark.asyncio
    async def test_me_without_cookie_is_forbidden(self, test_client):
        response = await test_client.get("/api/v1/auth/me")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_me_rejects_deactivated_user(
        self, test_client, test_staff, test_staff_token, db_session
    ):
        test_staff.is_active = False
        db_session.flush()
        set_access_token_cookie(test_client, test_staff_token)

        response = await test_client.get("/api/v1/auth/me")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_logout_clears_cookie(self, test_client):
        response = await test_client.post("/api/v1/auth/logout")

        assert response.status_code == 200
        assert response.json()["message"] == "Successfully logged out"
        assert "access_token" in response.headers.get("set-cookie", "")
