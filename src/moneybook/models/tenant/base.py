"""Base for entities owned by exactly one tenant."""

from sqlmodel import Field, SQLModel


class TenantScopedModel(SQLModel):
    """Mixin carrying the owning tenant's foreign key.

    Every row of a subclass belongs to one tenant and is only reachable
    through a tenant-scoped repository.
    """

    tenant_id: int = Field(foreign_key="tenants.id", index=True, ondelete="CASCADE")
