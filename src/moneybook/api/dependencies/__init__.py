"""FastAPI dependency injection definitions."""

from src.moneybook.api.dependencies.auth import (
    Authentication,
    CurrentPrincipal,
    CurrentUser,
    get_authentication,
    get_current_principal,
    get_current_user,
)
from src.moneybook.api.dependencies.db import DBSession, get_db_session
from src.moneybook.api.dependencies.repositories import (
    RoleAssignmentRepo,
    TenantRepo,
    TokenRepo,
    UserRepo,
    get_role_assignment_repository,
    get_tenant_repository,
    get_token_repository,
    get_user_repository,
)
from src.moneybook.api.dependencies.services import (
    AuthServiceDep,
    RegistrationServiceDep,
    RoleAssignmentServiceDep,
    TenantServiceDep,
    TransactionServiceDep,
    UserServiceDep,
)
from src.moneybook.api.dependencies.tenancy import (
    CurrentTenant,
    authorize_tenant_request,
    require_tenant_pipeline,
    resolve_tenant_context,
    tenant_scoped_router,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "Authentication",
    "CurrentPrincipal",
    "CurrentUser",
    "get_authentication",
    "get_current_principal",
    "get_current_user",
    # Tenancy
    "CurrentTenant",
    "authorize_tenant_request",
    "require_tenant_pipeline",
    "resolve_tenant_context",
    "tenant_scoped_router",
    # Repositories
    "RoleAssignmentRepo",
    "TenantRepo",
    "TokenRepo",
    "UserRepo",
    "get_role_assignment_repository",
    "get_tenant_repository",
    "get_token_repository",
    "get_user_repository",
    # Services
    "AuthServiceDep",
    "RegistrationServiceDep",
    "RoleAssignmentServiceDep",
    "TenantServiceDep",
    "TransactionServiceDep",
    "UserServiceDep",
]
