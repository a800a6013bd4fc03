"""Tenant isolation and role-based authorization primitives."""

from src.moneybook.core.tenancy.authorization import decide_tenant_access, parse_tenant_key
from src.moneybook.core.tenancy.claims import (
    TENANT_ROLE_CLAIM,
    ClaimsPrincipal,
    TenantClaim,
    parse_tenant_claims,
    tenant_claims_from_payload,
)
from src.moneybook.core.tenancy.context import (
    TenantAuthorization,
    TenantContext,
    TenantContextHolder,
)
from src.moneybook.core.tenancy.exceptions import (
    DuplicateRoleAssignmentError,
    LastOwnerError,
    RoleAssignmentNotFoundError,
    TenancyError,
    TenantAccessDeniedError,
    TenantContextNotSetError,
    TenantNotFoundError,
    TenantRouteNotDeclaredError,
)
from src.moneybook.core.tenancy.policy import (
    TENANT_KEY_PATH_PARAM,
    TenantRoutePolicy,
    is_tenant_scoped_path,
)

__all__ = [
    # Claims
    "TENANT_ROLE_CLAIM",
    "ClaimsPrincipal",
    "TenantClaim",
    "parse_tenant_claims",
    "tenant_claims_from_payload",
    # Authorization
    "TENANT_KEY_PATH_PARAM",
    "TenantRoutePolicy",
    "decide_tenant_access",
    "is_tenant_scoped_path",
    "parse_tenant_key",
    # Context
    "TenantAuthorization",
    "TenantContext",
    "TenantContextHolder",
    # Exceptions
    "DuplicateRoleAssignmentError",
    "LastOwnerError",
    "RoleAssignmentNotFoundError",
    "TenancyError",
    "TenantAccessDeniedError",
    "TenantContextNotSetError",
    "TenantNotFoundError",
    "TenantRouteNotDeclaredError",
]
