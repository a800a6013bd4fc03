"""Base repository for tenant-scoped entities."""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select
from sqlmodel.sql.expression import SelectOfScalar

from src.moneybook.core.tenancy.context import TenantContext
from src.moneybook.models.tenant import TenantScopedModel

ModelType = TypeVar("ModelType", bound=TenantScopedModel)


class TenantScopedRepository(Generic[ModelType]):
    """Data access for one tenant's rows of ``model``.

    Every query is derived from ``_base_query``, which is filtered to the
    tenant of the bound context. There is deliberately no ``get_by_id`` or
    other accessor that skips the filter.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession, tenant: TenantContext):
        self.session = session
        self.tenant = tenant

    def _base_query(self) -> SelectOfScalar[ModelType]:
        return select(self.model).where(self.model.tenant_id == self.tenant.tenant_id)

    async def list_all(self) -> list[ModelType]:
        result = await self.session.execute(self._base_query())
        return list(result.scalars().all())

    async def get_by_key(self, key: UUID) -> ModelType | None:
        result = await self.session.execute(
            self._base_query().where(self.model.key == key)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> ModelType:
        """Stamp the entity with the current tenant and add it to the session."""
        entity.tenant_id = self.tenant.tenant_id
        self.session.add(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        if entity.tenant_id != self.tenant.tenant_id:
            raise ValueError("Entity does not belong to the current tenant")
        await self.session.delete(entity)
