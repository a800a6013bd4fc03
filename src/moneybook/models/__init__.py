"""Model exports.

Import from here: `from src.moneybook.models import User, Tenant`
"""

from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import RefreshToken, Tenant, User, UserTenantRoleAssignment
from src.moneybook.models.tenant import TENANT_SCOPED_MODELS, TenantScopedModel, Transaction

__all__ = [
    # Enums
    "TenantRole",
    # Shared models
    "RefreshToken",
    "Tenant",
    "User",
    "UserTenantRoleAssignment",
    # Tenant-scoped models
    "TENANT_SCOPED_MODELS",
    "TenantScopedModel",
    "Transaction",
]
