"""Tenant claims issuance."""

from uuid import UUID

from src.moneybook.core.logging import get_logger
from src.moneybook.core.tenancy.claims import TenantClaim
from src.moneybook.repositories import RoleAssignmentRepository

logger = get_logger(__name__)


class TenantClaimsIssuer:
    """Builds the tenant role claims embedded in a user's access token."""

    def __init__(self, role_repo: RoleAssignmentRepository):
        self.role_repo = role_repo

    async def issue_claims(self, user_id: UUID) -> list[TenantClaim]:
        """One claim per tenant the user holds a role in.

        A user with no assignments gets an empty list.
        """
        memberships = await self.role_repo.list_for_user(user_id)
        claims = [TenantClaim(tenant_key=tenant.key, role=role) for tenant, role in memberships]
        logger.debug("Issued tenant claims", user_id=str(user_id), claim_count=len(claims))
        return claims
