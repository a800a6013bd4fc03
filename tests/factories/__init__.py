"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, TenantFactory, ...
"""

from tests.factories.base import BaseFactory, short_id, utc_now
from tests.factories.tenant import TenantFactory, TransactionFactory
from tests.factories.user import (
    DEFAULT_TEST_PASSWORD,
    UserFactory,
    UserTenantRoleAssignmentFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    "short_id",
    "utc_now",
    # Tenant
    "TenantFactory",
    "TransactionFactory",
    # User
    "UserFactory",
    "UserTenantRoleAssignmentFactory",
    "DEFAULT_TEST_PASSWORD",
]
