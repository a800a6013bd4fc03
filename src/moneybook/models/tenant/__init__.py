"""Tenant-scoped models.

``TENANT_SCOPED_MODELS`` lists every table whose rows belong to a single
tenant. Tenant deletion removes rows from each of them.
"""

from src.moneybook.models.tenant.base import TenantScopedModel
from src.moneybook.models.tenant.transaction import Transaction

TENANT_SCOPED_MODELS: tuple[type[TenantScopedModel], ...] = (Transaction,)

__all__ = [
    "TENANT_SCOPED_MODELS",
    "TenantScopedModel",
    "Transaction",
]
