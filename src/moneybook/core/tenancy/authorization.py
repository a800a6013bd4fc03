"""Claim-based tenant authorization decision."""

from uuid import UUID

from src.moneybook.core.tenancy.claims import ClaimsPrincipal
from src.moneybook.core.tenancy.context import TenantAuthorization
from src.moneybook.core.tenancy.exceptions import TenantAccessDeniedError
from src.moneybook.models.enums import TenantRole


def parse_tenant_key(raw: str | None) -> UUID | None:
    """Parse a tenant key from a request path, returning None if malformed."""
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None


def decide_tenant_access(
    principal: ClaimsPrincipal,
    raw_tenant_key: str | None,
    minimum_role: TenantRole,
) -> TenantAuthorization:
    """Grant access when the principal holds a claim for the tenant at or above ``minimum_role``.

    Raises:
        TenantAccessDeniedError: The key is missing or malformed, no claim names
            the tenant, or the claimed role is below the minimum.
    """
    tenant_key = parse_tenant_key(raw_tenant_key)
    if tenant_key is None:
        raise TenantAccessDeniedError(raw_tenant_key, reason="missing or malformed tenant key")

    claim = principal.claim_for(tenant_key)
    if claim is None:
        raise TenantAccessDeniedError(tenant_key, reason="no claim for tenant")

    if not claim.role.satisfies(minimum_role):
        raise TenantAccessDeniedError(
            tenant_key,
            reason=f"role {claim.role.value} below required {minimum_role.value}",
        )

    return TenantAuthorization(tenant_key=tenant_key, role=claim.role)
