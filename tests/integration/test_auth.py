"""Tests for authentication endpoints and the tenant claims they issue."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.security import decode_token
from src.moneybook.core.tenancy import TENANT_ROLE_CLAIM
from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import Tenant, User
from tests.factories import DEFAULT_TEST_PASSWORD, short_id
from tests.helpers import assign_role, bearer, create_tenant, create_user

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

STRONG_PASSWORD = "correct-horse-battery-staple"


async def _login(client: AsyncClient, email: str, password: str = DEFAULT_TEST_PASSWORD) -> dict:
    response = await client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.json()
    return response.json()


class TestRegistration:
    async def test_register_creates_user_without_tenants(self, client: AsyncClient) -> None:
        email = f"newuser_{short_id()}@example.com"

        response = await client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": STRONG_PASSWORD, "full_name": "  New User "},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == email
        assert data["user"]["full_name"] == "New User"

        tokens = await _login(client, email, STRONG_PASSWORD)
        payload = decode_token(tokens["access_token"])
        assert payload is not None
        assert payload[TENANT_ROLE_CLAIM] == []

    async def test_register_duplicate_email_fails(self, client: AsyncClient) -> None:
        email = f"duplicate_{short_id()}@example.com"
        first = await client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": STRONG_PASSWORD, "full_name": "First User"},
        )
        assert first.status_code == 201

        response = await client.post(
            "/api/v1/auth/register",
            json={"email": email.upper(), "password": "purple-monkey-dishwasher-99", "full_name": "Second"},
        )

        assert response.status_code == 409
        assert response.json()["kind"] == "conflict"

    async def test_register_rejects_weak_password(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/register",
            json={"email": f"weak_{short_id()}@example.com", "password": "password1", "full_name": "Weak"},
        )
        assert response.status_code == 422


class TestLogin:
    async def test_login_issues_one_claim_per_tenant(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await create_user(db_session)
        household = await create_tenant(db_session)
        business = await create_tenant(db_session)
        await assign_role(db_session, user, household, TenantRole.OWNER)
        await assign_role(db_session, user, business, TenantRole.VIEWER)

        tokens = await _login(client, user.email)

        assert tokens["token_type"] == "bearer"
        payload = decode_token(tokens["access_token"])
        assert payload is not None
        assert payload["sub"] == str(user.id)
        assert sorted(payload[TENANT_ROLE_CLAIM]) == sorted(
            [f"{household.key}:Owner", f"{business.key}:Viewer"]
        )

    async def test_login_omits_inactive_tenants(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await create_user(db_session)
        closed = await create_tenant(db_session, is_active=False)
        await assign_role(db_session, user, closed, TenantRole.OWNER)

        tokens = await _login(client, user.email)

        assert decode_token(tokens["access_token"])[TENANT_ROLE_CLAIM] == []  # type: ignore[index]

    async def test_login_wrong_password(self, client: AsyncClient, db_session: AsyncSession) -> None:
        user = await create_user(db_session)

        response = await client.post(
            "/api/v1/auth/login", json={"email": user.email, "password": "wrongpassword"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    async def test_login_unknown_email_looks_like_wrong_password(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": f"nobody_{short_id()}@example.com", "password": DEFAULT_TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    async def test_login_inactive_user(self, client: AsyncClient, db_session: AsyncSession) -> None:
        user = await create_user(db_session, is_active=False)

        response = await client.post(
            "/api/v1/auth/login", json={"email": user.email, "password": DEFAULT_TEST_PASSWORD}
        )

        assert response.status_code == 401


class TestTokenOperations:
    async def test_refresh_reissues_current_claims(
        self, client: AsyncClient, db_session: AsyncSession, tenant: Tenant
    ) -> None:
        user = await create_user(db_session)
        tokens = await _login(client, user.email)
        assert decode_token(tokens["access_token"])[TENANT_ROLE_CLAIM] == []  # type: ignore[index]

        await assign_role(db_session, user, tenant, TenantRole.EDITOR)
        response = await client.post(
            "/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]}
        )

        assert response.status_code == 200
        payload = decode_token(response.json()["access_token"])
        assert payload is not None
        assert payload[TENANT_ROLE_CLAIM] == [f"{tenant.key}:Editor"]

    async def test_refresh_rotates_token(self, client: AsyncClient, owner: User) -> None:
        tokens = await _login(client, owner.email)

        first = await client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert first.status_code == 200
        assert first.json()["refresh_token"] != tokens["refresh_token"]

        replay = await client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert replay.status_code == 401

    async def test_refresh_rejects_access_token(self, client: AsyncClient, owner: User) -> None:
        tokens = await _login(client, owner.email)

        response = await client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["access_token"]})

        assert response.status_code == 401

    async def test_logout_revokes_refresh_token(self, client: AsyncClient, owner: User) -> None:
        tokens = await _login(client, owner.email)

        response = await client.post("/api/v1/auth/logout", json={"refresh_token": tokens["refresh_token"]})
        assert response.status_code == 204

        refresh = await client.post("/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert refresh.status_code == 401


class TestCurrentUser:
    async def test_get_me(self, client: AsyncClient, owner: User) -> None:
        tokens = await _login(client, owner.email)

        response = await client.get("/api/v1/users/me", headers=bearer(tokens["access_token"]))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(owner.id)
        assert data["email"] == owner.email

    async def test_get_me_without_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/users/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["kind"] == "unauthorized"

    async def test_get_me_rejects_refresh_token(self, client: AsyncClient, owner: User) -> None:
        tokens = await _login(client, owner.email)

        response = await client.get("/api/v1/users/me", headers=bearer(tokens["refresh_token"]))

        assert response.status_code == 401

    async def test_get_me_rejects_garbage_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/users/me", headers=bearer("not-a-jwt"))

        assert response.status_code == 401
