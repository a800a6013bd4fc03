"""Tenant registry and role assignments."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.moneybook.models.base import utc_now
from src.moneybook.models.enums import TenantRole


class Tenant(SQLModel, table=True):
    """An isolated data space (one household's or one business's books).

    ``id`` is the internal surrogate key used in foreign keys. Only ``key`` is
    ever exposed to clients.
    """

    __tablename__ = "tenants"

    id: int | None = Field(default=None, primary_key=True)
    key: UUID = Field(default_factory=uuid4, unique=True, index=True)
    name: str = Field(max_length=100)
    description: str = Field(max_length=500)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)


class UserTenantRoleAssignment(SQLModel, table=True):
    """Grants one user one role in one tenant."""

    __tablename__ = "tenant_role_assignments"
    __table_args__ = (UniqueConstraint("user_id", "tenant_id", name="uq_tenant_role_user_tenant"),)

    id: int | None = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    tenant_id: int = Field(foreign_key="tenants.id", index=True, ondelete="CASCADE")
    role: str = Field(default=TenantRole.VIEWER.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> TenantRole:
        return TenantRole(self.role)
