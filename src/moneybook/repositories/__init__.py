"""Repository layer - data access abstraction."""

from src.moneybook.repositories.base import BaseRepository
from src.moneybook.repositories.public import (
    RefreshTokenRepository,
    RoleAssignmentRepository,
    TenantRepository,
    UserRepository,
)
from src.moneybook.repositories.tenant import TenantScopedRepository, TransactionRepository

__all__ = [
    # Base
    "BaseRepository",
    "TenantScopedRepository",
    # Shared
    "RefreshTokenRepository",
    "RoleAssignmentRepository",
    "TenantRepository",
    "UserRepository",
    # Tenant-scoped
    "TransactionRepository",
]
