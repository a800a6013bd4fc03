"""Tenancy exception taxonomy.

Each exception maps to exactly one HTTP status in
``src.moneybook.core.exceptions.setup_exception_handlers``. Messages are for
logs only; clients receive a generic body.
"""

from uuid import UUID


class TenancyError(Exception):
    """Base class for tenant isolation and authorization failures."""


class TenantNotFoundError(TenancyError):
    """The tenant referenced by a request does not exist."""

    def __init__(self, tenant_key: UUID | str):
        self.tenant_key = tenant_key
        super().__init__(f"Tenant {tenant_key} not found")


class TenantAccessDeniedError(TenancyError):
    """The caller has no sufficient role for the tenant named in the request."""

    def __init__(self, tenant_key: UUID | str | None, reason: str = "insufficient role"):
        self.tenant_key = tenant_key
        self.reason = reason
        super().__init__(f"Access to tenant {tenant_key} denied: {reason}")


class RoleAssignmentNotFoundError(TenancyError):
    def __init__(self, user_id: UUID, tenant_key: UUID):
        self.user_id = user_id
        self.tenant_key = tenant_key
        super().__init__(f"User {user_id} has no role in tenant {tenant_key}")


class DuplicateRoleAssignmentError(TenancyError):
    def __init__(self, user_id: UUID, tenant_key: UUID):
        self.user_id = user_id
        self.tenant_key = tenant_key
        super().__init__(f"User {user_id} already has a role in tenant {tenant_key}")


class TenantContextNotSetError(TenancyError):
    """Tenant-scoped code ran without a resolved tenant context.

    Always a programming error: the route was not wired through the tenant
    authorization dependency.
    """

    def __init__(self, path: str | None = None):
        self.path = path
        message = "Tenant context is not set"
        if path:
            message = f"{message} for {path}"
        super().__init__(message)


class TenantRouteNotDeclaredError(TenancyError):
    """A tenant-scoped route has no minimum role declared."""

    def __init__(self, route_name: str | None):
        self.route_name = route_name
        super().__init__(f"Tenant-scoped route {route_name!r} has no declared minimum role")


class LastOwnerError(TenancyError):
    """The change would leave the tenant without an Owner."""

    def __init__(self, user_id: UUID, tenant_key: UUID):
        self.user_id = user_id
        self.tenant_key = tenant_key
        super().__init__(f"User {user_id} is the last Owner of tenant {tenant_key}")
