"""Tenant lifecycle service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.logging import get_logger
from src.moneybook.core.tenancy.context import TenantContext
from src.moneybook.core.tenancy.exceptions import TenantNotFoundError
from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import Tenant
from src.moneybook.repositories import RoleAssignmentRepository, TenantRepository
from src.moneybook.schemas.tenant import TenantEdit

logger = get_logger(__name__)


class TenantService:
    """Tenant creation, listing, update and deletion.

    Operations on an existing tenant take the request's ``TenantContext``;
    the caller has already been authorized for it.
    """

    def __init__(
        self,
        tenant_repo: TenantRepository,
        role_repo: RoleAssignmentRepository,
        session: AsyncSession,
    ):
        self.tenant_repo = tenant_repo
        self.role_repo = role_repo
        self.session = session

    async def create_tenant(self, owner_id: UUID, data: TenantEdit) -> Tenant:
        """Create a tenant and make ``owner_id`` its Owner in one transaction."""
        try:
            tenant = Tenant(name=data.name, description=data.description)
            self.tenant_repo.add(tenant)
            await self.session.flush()

            self.role_repo.create(owner_id, tenant.id, TenantRole.OWNER)  # type: ignore[arg-type]
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(tenant)
        logger.info("Tenant created", tenant_key=str(tenant.key), owner_id=str(owner_id))
        return tenant

    async def list_user_tenants(self, user_id: UUID) -> list[tuple[Tenant, TenantRole]]:
        return await self.role_repo.list_for_user(user_id)

    async def get_tenant(self, context: TenantContext) -> Tenant:
        tenant = await self.tenant_repo.get_by_id(context.tenant_id)
        if tenant is None:
            raise TenantNotFoundError(context.tenant_key)
        return tenant

    async def update_tenant(self, context: TenantContext, data: TenantEdit) -> Tenant:
        tenant = await self.get_tenant(context)
        try:
            tenant.name = data.name
            tenant.description = data.description
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(tenant)
        return tenant

    async def delete_tenant(self, context: TenantContext) -> None:
        """Hard-delete the tenant with its role assignments and tenant-scoped data."""
        try:
            await self.tenant_repo.delete_with_dependents(context.tenant_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Tenant deleted", tenant_key=str(context.tenant_key))
