"""Repository for UserTenantRoleAssignment entity."""

from uuid import UUID

from sqlalchemy import func
from sqlmodel import select

from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import Tenant, User, UserTenantRoleAssignment
from src.moneybook.repositories.base import BaseRepository


class RoleAssignmentRepository(BaseRepository[UserTenantRoleAssignment]):
    """Repository for user-tenant role assignments."""

    model = UserTenantRoleAssignment

    async def get_assignment(self, user_id: UUID, tenant_id: int) -> UserTenantRoleAssignment | None:
        result = await self.session.execute(
            select(UserTenantRoleAssignment).where(
                UserTenantRoleAssignment.user_id == user_id,
                UserTenantRoleAssignment.tenant_id == tenant_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_live_role(self, user_id: UUID, tenant_key: UUID) -> TenantRole | None:
        """Current role of a user in an active tenant, read straight from the store."""
        result = await self.session.execute(
            select(UserTenantRoleAssignment.role)
            .join(Tenant, Tenant.id == UserTenantRoleAssignment.tenant_id)  # type: ignore[arg-type]
            .where(
                UserTenantRoleAssignment.user_id == user_id,
                Tenant.key == tenant_key,
                Tenant.is_active == True,  # noqa: E712
            )
        )
        role = result.scalar_one_or_none()
        return TenantRole.parse(role) if role is not None else None

    async def list_for_user(self, user_id: UUID) -> list[tuple[Tenant, TenantRole]]:
        """Tenants the user belongs to, with the user's role in each."""
        result = await self.session.execute(
            select(Tenant, UserTenantRoleAssignment.role)
            .join(
                UserTenantRoleAssignment,
                Tenant.id == UserTenantRoleAssignment.tenant_id,  # type: ignore[arg-type]
            )
            .where(
                UserTenantRoleAssignment.user_id == user_id,
                Tenant.is_active == True,  # noqa: E712
            )
            .order_by(Tenant.created_at, Tenant.id)  # type: ignore[arg-type]
        )
        return [(tenant, TenantRole(role)) for tenant, role in result.all()]

    async def list_for_tenant(self, tenant_id: int) -> list[tuple[UserTenantRoleAssignment, User]]:
        """Role assignments of a tenant, with the assigned users."""
        result = await self.session.execute(
            select(UserTenantRoleAssignment, User)
            .join(User, User.id == UserTenantRoleAssignment.user_id)  # type: ignore[arg-type]
            .where(UserTenantRoleAssignment.tenant_id == tenant_id)
            .order_by(UserTenantRoleAssignment.id)  # type: ignore[arg-type]
        )
        return [(assignment, user) for assignment, user in result.all()]

    async def count_owners(self, tenant_id: int) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(UserTenantRoleAssignment)
            .where(
                UserTenantRoleAssignment.tenant_id == tenant_id,
                UserTenantRoleAssignment.role == TenantRole.OWNER.value,
            )
        )
        return result.scalar_one()

    def create(
        self, user_id: UUID, tenant_id: int, role: TenantRole
    ) -> UserTenantRoleAssignment:
        """Add a role assignment (no commit)."""
        assignment = UserTenantRoleAssignment(user_id=user_id, tenant_id=tenant_id, role=role.value)
        self.session.add(assignment)
        return assignment
