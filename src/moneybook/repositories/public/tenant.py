"""Repository for Tenant entity."""

from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.moneybook.models.public import Tenant, UserTenantRoleAssignment
from src.moneybook.models.tenant import TENANT_SCOPED_MODELS
from src.moneybook.repositories.base import BaseRepository


class TenantRepository(BaseRepository[Tenant]):
    """Repository for the tenant registry."""

    model = Tenant

    async def get_by_key(self, key: UUID, active_only: bool = True) -> Tenant | None:
        """Get tenant by its public key."""
        query = select(Tenant).where(Tenant.key == key)
        if active_only:
            query = query.where(Tenant.is_active == True)  # noqa: E712
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def delete_with_dependents(self, tenant_id: int) -> None:
        """Hard-delete a tenant, its tenant-scoped rows and its role assignments."""
        for model in TENANT_SCOPED_MODELS:
            await self.session.execute(
                delete(model).where(model.tenant_id == tenant_id)  # type: ignore[arg-type]
            )
        await self.session.execute(
            delete(UserTenantRoleAssignment).where(
                UserTenantRoleAssignment.tenant_id == tenant_id  # type: ignore[arg-type]
            )
        )
        await self.session.execute(delete(Tenant).where(Tenant.id == tenant_id))  # type: ignore[arg-type]
