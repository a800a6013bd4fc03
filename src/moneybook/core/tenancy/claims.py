"""Tenant role claims carried in access tokens.

Each claim has the form ``"{tenant_key}:{role}"`` and is stored in the
``tenant_role`` list of the JWT payload.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.moneybook.core.logging import get_logger
from src.moneybook.models.enums import TenantRole

logger = get_logger(__name__)

TENANT_ROLE_CLAIM = "tenant_role"


@dataclass(frozen=True)
class TenantClaim:
    tenant_key: UUID
    role: TenantRole

    def encode(self) -> str:
        return f"{self.tenant_key}:{self.role.value}"

    @classmethod
    def parse(cls, value: str) -> "TenantClaim":
        """Parse ``"{tenant_key}:{role}"``.

        Raises:
            ValueError: If the value is not a well-formed claim.
        """
        parts = value.split(":")
        if len(parts) != 2:
            raise ValueError(f"Malformed tenant role claim: {value!r}")
        key_part, role_part = parts
        role = TenantRole.parse(role_part)
        if role is None:
            raise ValueError(f"Unknown tenant role in claim: {value!r}")
        return cls(tenant_key=UUID(key_part), role=role)


def parse_tenant_claims(values: Iterable[Any]) -> list[TenantClaim]:
    """Parse raw claim values, skipping malformed ones.

    A malformed entry never grants access; it is logged and dropped.
    """
    claims: list[TenantClaim] = []
    for value in values:
        if not isinstance(value, str):
            logger.warning("Ignoring non-string tenant role claim", claim_type=type(value).__name__)
            continue
        try:
            claims.append(TenantClaim.parse(value))
        except ValueError:
            logger.warning("Ignoring malformed tenant role claim", claim=value)
    return claims


def tenant_claims_from_payload(payload: dict[str, Any]) -> list[TenantClaim]:
    """Extract tenant claims from a decoded access token payload."""
    raw = payload.get(TENANT_ROLE_CLAIM) or []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        logger.warning("Ignoring tenant role claim with unexpected shape")
        return []
    return parse_tenant_claims(raw)


@dataclass(frozen=True)
class ClaimsPrincipal:
    """The authenticated caller as described by their access token."""

    user_id: UUID
    tenant_claims: tuple[TenantClaim, ...] = ()

    def claim_for(self, tenant_key: UUID) -> TenantClaim | None:
        """Return the first claim naming ``tenant_key``, if any."""
        for claim in self.tenant_claims:
            if claim.tenant_key == tenant_key:
                return claim
        return None
