"""Tenant schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.moneybook.models.enums import TenantRole


class TenantEdit(BaseModel):
    """Schema for creating or updating a tenant."""

    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)

    @field_validator("name", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Value cannot be empty or whitespace only")
        return v


class TenantRead(BaseModel):
    key: UUID
    name: str
    description: str
    created_at: datetime

    model_config = {"from_attributes": True}


class TenantRoleRead(TenantRead):
    """A tenant together with the caller's role in it."""

    role: TenantRole
