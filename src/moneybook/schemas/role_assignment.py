"""Role assignment schemas for API request/response."""

from uuid import UUID

from pydantic import BaseModel, EmailStr

from src.moneybook.models.enums import TenantRole


class RoleAssignmentCreate(BaseModel):
    """Grant an existing user a role in the tenant."""

    email: EmailStr
    role: TenantRole


class RoleAssignmentUpdate(BaseModel):
    role: TenantRole


class RoleAssignmentRead(BaseModel):
    user_id: UUID
    email: str
    full_name: str
    role: TenantRole
