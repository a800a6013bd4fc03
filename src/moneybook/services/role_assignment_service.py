"""Role assignment management within the current tenant."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.logging import get_logger
from src.moneybook.core.tenancy.context import TenantContext
from src.moneybook.core.tenancy.exceptions import (
    DuplicateRoleAssignmentError,
    LastOwnerError,
    RoleAssignmentNotFoundError,
)
from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import User, UserTenantRoleAssignment
from src.moneybook.repositories import RoleAssignmentRepository, UserRepository

logger = get_logger(__name__)


class RoleAssignmentService:
    def __init__(
        self,
        role_repo: RoleAssignmentRepository,
        user_repo: UserRepository,
        session: AsyncSession,
        tenant: TenantContext,
    ):
        self.role_repo = role_repo
        self.user_repo = user_repo
        self.session = session
        self.tenant = tenant

    async def list_assignments(self) -> list[tuple[UserTenantRoleAssignment, User]]:
        return await self.role_repo.list_for_tenant(self.tenant.tenant_id)

    async def assign_role(self, email: str, role: TenantRole) -> tuple[UserTenantRoleAssignment, User]:
        """Give an existing user a role in the tenant.

        Raises:
            ValueError: No user is registered with ``email``.
            DuplicateRoleAssignmentError: The user already has a role here. The
                existing assignment is left unchanged.
        """
        user = await self.user_repo.get_by_email(email.lower().strip())
        if user is None:
            raise ValueError("User not found")

        existing = await self.role_repo.get_assignment(user.id, self.tenant.tenant_id)
        if existing is not None:
            raise DuplicateRoleAssignmentError(user.id, self.tenant.tenant_key)

        assignment = self.role_repo.create(user.id, self.tenant.tenant_id, role)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent assignment for the same user
            await self.session.rollback()
            raise DuplicateRoleAssignmentError(user.id, self.tenant.tenant_key) from e

        await self.session.refresh(assignment)
        logger.info(
            "Role assigned",
            assignee_id=str(user.id),
            role=role.value,
        )
        return assignment, user

    async def _get_or_raise(self, user_id: UUID) -> UserTenantRoleAssignment:
        assignment = await self.role_repo.get_assignment(user_id, self.tenant.tenant_id)
        if assignment is None:
            raise RoleAssignmentNotFoundError(user_id, self.tenant.tenant_key)
        return assignment

    async def _ensure_other_owner(self, assignment: UserTenantRoleAssignment) -> None:
        if assignment.role_enum is not TenantRole.OWNER:
            return
        if await self.role_repo.count_owners(self.tenant.tenant_id) <= 1:
            raise LastOwnerError(assignment.user_id, self.tenant.tenant_key)

    async def change_role(self, user_id: UUID, role: TenantRole) -> tuple[UserTenantRoleAssignment, User]:
        """Set the user's role in the tenant.

        Raises:
            RoleAssignmentNotFoundError: The user has no role here.
            LastOwnerError: The user is the only Owner and ``role`` is lower.
        """
        assignment = await self._get_or_raise(user_id)
        if role is not TenantRole.OWNER:
            await self._ensure_other_owner(assignment)
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise RoleAssignmentNotFoundError(user_id, self.tenant.tenant_key)

        try:
            assignment.role = role.value
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Role changed", assignee_id=str(user_id), role=role.value)
        return assignment, user

    async def revoke_role(self, user_id: UUID) -> None:
        """Remove the user from the tenant. The last Owner cannot be removed."""
        assignment = await self._get_or_raise(user_id)
        await self._ensure_other_owner(assignment)
        try:
            await self.session.delete(assignment)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Role revoked", assignee_id=str(user_id))
