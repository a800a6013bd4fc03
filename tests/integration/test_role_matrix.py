"""Role x route authorization matrix.

Every tenant-scoped route is called by every role. A role at or above the
route's minimum must get past authorization (any status but 403); a role
below it must get 403.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.moneybook.api.v1.router import build_tenant_route_policy
from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import Tenant, User, UserTenantRoleAssignment
from tests.helpers import auth_headers, claims_headers, create_member, tenant_path

pytestmark = pytest.mark.integration

_TENANT_BODY = {"name": "Renamed", "description": "Updated"}
_TRANSACTION_BODY = {"date": "2024-01-31", "payee": "Landlord", "amount": "-1200.00"}

# (route name, method, path suffix, json body)
ROUTES = [
    ("tenants:get", "GET", "", None),
    ("tenants:update", "PUT", "", _TENANT_BODY),
    ("tenants:delete", "DELETE", "", None),
    ("roles:list", "GET", "/roles", None),
    ("roles:assign", "POST", "/roles", {"email": "nobody@example.com", "role": "Viewer"}),
    ("roles:change", "PUT", f"/roles/{uuid4()}", {"role": "Editor"}),
    ("roles:revoke", "DELETE", f"/roles/{uuid4()}", None),
    ("transactions:list", "GET", "/transactions", None),
    ("transactions:get", "GET", f"/transactions/{uuid4()}", None),
    ("transactions:create", "POST", "/transactions", _TRANSACTION_BODY),
    ("transactions:update", "PUT", f"/transactions/{uuid4()}", _TRANSACTION_BODY),
    ("transactions:delete", "DELETE", f"/transactions/{uuid4()}", None),
]

MATRIX = [
    pytest.param(name, method, suffix, body, role, id=f"{name}-{role.value}")
    for name, method, suffix, body in ROUTES
    for role in TenantRole
]


def test_matrix_covers_every_declared_route() -> None:
    policy = build_tenant_route_policy()
    names = {name for name, *_ in ROUTES}

    assert len(policy) == len(names)
    assert all(name in policy for name in names)


@pytest.mark.parametrize(("route_name", "method", "suffix", "body", "role"), MATRIX)
async def test_role_matrix(
    client: AsyncClient,
    db_session: AsyncSession,
    tenant: Tenant,
    route_name: str,
    method: str,
    suffix: str,
    body: dict | None,
    role: TenantRole,
) -> None:
    caller = await create_member(db_session, tenant, role)
    minimum = build_tenant_route_policy().minimum_role_for(route_name)
    assert minimum is not None

    response = await client.request(
        method,
        tenant_path(tenant, suffix),
        json=body,
        headers=await auth_headers(db_session, caller),
    )

    if role.satisfies(minimum):
        assert response.status_code != 403, response.json()
        assert response.status_code < 500
    else:
        assert response.status_code == 403
        assert response.json()["kind"] == "forbidden"


async def _set_role(session: AsyncSession, user: User, tenant: Tenant, role: TenantRole) -> None:
    result = await session.execute(
        select(UserTenantRoleAssignment).where(
            UserTenantRoleAssignment.user_id == user.id,
            UserTenantRoleAssignment.tenant_id == tenant.id,
        )
    )
    assignment = result.scalar_one()
    assignment.role = role.value
    await session.commit()


class TestLiveRoleCheck:
    async def test_demotion_applies_before_token_expiry(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        owner: User,
    ) -> None:
        stale_headers = await auth_headers(db_session, owner)
        await _set_role(db_session, owner, tenant, TenantRole.VIEWER)

        update = await client.put(tenant_path(tenant), json=_TENANT_BODY, headers=stale_headers)
        read = await client.get(tenant_path(tenant), headers=stale_headers)

        assert update.status_code == 403
        assert read.status_code == 200
        assert read.json()["role"] == "Viewer"

    async def test_revocation_applies_before_token_expiry(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        owner: User,
        editor: User,
        owner_headers: dict[str, str],
    ) -> None:
        stale_headers = await auth_headers(db_session, editor)
        revoke = await client.delete(tenant_path(tenant, f"/roles/{editor.id}"), headers=owner_headers)
        assert revoke.status_code == 204

        response = await client.get(tenant_path(tenant, "/transactions"), headers=stale_headers)

        assert response.status_code == 403

    async def test_promotion_needs_a_fresh_token(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        viewer: User,
    ) -> None:
        stale_headers = await auth_headers(db_session, viewer)
        await _set_role(db_session, viewer, tenant, TenantRole.OWNER)

        stale = await client.get(tenant_path(tenant, "/roles"), headers=stale_headers)
        fresh = await client.get(tenant_path(tenant, "/roles"), headers=await auth_headers(db_session, viewer))

        assert stale.status_code == 403
        assert fresh.status_code == 200


class TestClaimsOnlyMode:
    async def test_stale_claim_is_honoured_without_live_check(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        viewer: User,
        live_check_disabled: None,
    ) -> None:
        headers = claims_headers(viewer, (tenant, TenantRole.EDITOR))

        response = await client.get(tenant_path(tenant), headers=headers)

        assert response.status_code == 200
        assert response.json()["role"] == "Editor"

    async def test_insufficient_claim_is_denied_without_live_check(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        tenant: Tenant,
        owner: User,
        live_check_disabled: None,
    ) -> None:
        headers = claims_headers(owner, (tenant, TenantRole.VIEWER))

        response = await client.delete(tenant_path(tenant), headers=headers)

        assert response.status_code == 403
