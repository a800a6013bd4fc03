"""Repositories for tenant-scoped entities."""

from src.moneybook.repositories.tenant.scoped import TenantScopedRepository
from src.moneybook.repositories.tenant.transaction import TransactionRepository

__all__ = [
    "TenantScopedRepository",
    "TransactionRepository",
]
