"""Repositories for shared (non tenant-scoped) entities."""

from src.moneybook.repositories.public.role_assignment import RoleAssignmentRepository
from src.moneybook.repositories.public.tenant import TenantRepository
from src.moneybook.repositories.public.token import RefreshTokenRepository
from src.moneybook.repositories.public.user import UserRepository

__all__ = [
    "RefreshTokenRepository",
    "RoleAssignmentRepository",
    "TenantRepository",
    "UserRepository",
]
