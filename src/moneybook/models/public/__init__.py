"""Shared models: users, tenants, role assignments and credentials."""

from src.moneybook.models.public.auth import RefreshToken
from src.moneybook.models.public.tenant import Tenant, UserTenantRoleAssignment
from src.moneybook.models.public.user import User

__all__ = [
    "RefreshToken",
    "Tenant",
    "User",
    "UserTenantRoleAssignment",
]
