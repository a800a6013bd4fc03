"""Test helper functions for common data creation patterns."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.security import create_access_token
from src.moneybook.core.tenancy import ClaimsPrincipal, TenantClaim
from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import Tenant, User, UserTenantRoleAssignment
from src.moneybook.models.tenant import Transaction
from src.moneybook.repositories import RoleAssignmentRepository
from src.moneybook.services import TenantClaimsIssuer
from tests.factories import (
    TenantFactory,
    TransactionFactory,
    UserFactory,
    UserTenantRoleAssignmentFactory,
)


async def create_user(session: AsyncSession, **user_kwargs) -> User:
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.commit()
    return user


async def create_tenant(session: AsyncSession, **tenant_kwargs) -> Tenant:
    tenant = TenantFactory.build(**tenant_kwargs)
    session.add(tenant)
    await session.commit()
    await session.refresh(tenant)
    return tenant


async def assign_role(
    session: AsyncSession,
    user: User,
    tenant: Tenant,
    role: TenantRole = TenantRole.OWNER,
) -> UserTenantRoleAssignment:
    """Give ``user`` a role in ``tenant`` directly in the store."""
    assignment = UserTenantRoleAssignmentFactory.build(
        user_id=user.id,
        tenant_id=tenant.id,
        role=role.value,
    )
    session.add(assignment)
    await session.commit()
    return assignment


async def create_member(
    session: AsyncSession,
    tenant: Tenant,
    role: TenantRole = TenantRole.OWNER,
    **user_kwargs,
) -> User:
    """Create a user holding ``role`` in ``tenant``."""
    user = await create_user(session, **user_kwargs)
    await assign_role(session, user, tenant, role)
    return user


async def create_transactions(
    session: AsyncSession, tenant: Tenant, count: int, **kwargs
) -> list[Transaction]:
    transactions = TransactionFactory.batch(count, tenant_id=tenant.id, **kwargs)
    session.add_all(transactions)
    await session.commit()
    return transactions


async def auth_headers(session: AsyncSession, user: User) -> dict[str, str]:
    """Bearer headers with the user's current tenant claims, as login would issue them."""
    claims = await TenantClaimsIssuer(RoleAssignmentRepository(session)).issue_claims(user.id)
    return bearer(create_access_token(user.id, claims))


def claims_headers(user: User, *claims: tuple[Tenant, TenantRole]) -> dict[str, str]:
    """Bearer headers carrying exactly the given claims, whatever the store says."""
    token = create_access_token(
        user.id,
        [TenantClaim(tenant_key=tenant.key, role=role) for tenant, role in claims],
    )
    return bearer(token)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def make_principal(user_id: UUID, *claims: tuple[UUID, TenantRole]) -> ClaimsPrincipal:
    """Build a principal holding one claim per (tenant_key, role) pair."""
    return ClaimsPrincipal(
        user_id=user_id,
        tenant_claims=tuple(TenantClaim(tenant_key=key, role=role) for key, role in claims),
    )


def tenant_path(tenant: Tenant | UUID | str, suffix: str = "") -> str:
    key = tenant.key if isinstance(tenant, Tenant) else tenant
    return f"/api/v1/tenant/{key}{suffix}"
