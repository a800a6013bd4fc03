"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.moneybook.api.dependencies.db import DBSession
from src.moneybook.api.dependencies.repositories import (
    RoleAssignmentRepo,
    TenantRepo,
    TokenRepo,
    UserRepo,
)
from src.moneybook.api.dependencies.tenancy import CurrentTenant
from src.moneybook.repositories import TransactionRepository
from src.moneybook.services import (
    AuthService,
    RegistrationService,
    RoleAssignmentService,
    TenantClaimsIssuer,
    TenantService,
    TransactionService,
    UserService,
)


def get_claims_issuer(role_repo: RoleAssignmentRepo) -> TenantClaimsIssuer:
    return TenantClaimsIssuer(role_repo)


def get_auth_service(
    session: DBSession,
    user_repo: UserRepo,
    token_repo: TokenRepo,
    claims_issuer: Annotated[TenantClaimsIssuer, Depends(get_claims_issuer)],
) -> AuthService:
    return AuthService(user_repo, token_repo, claims_issuer, session)


def get_registration_service(session: DBSession, user_repo: UserRepo) -> RegistrationService:
    return RegistrationService(user_repo, session)


def get_user_service(session: DBSession, user_repo: UserRepo) -> UserService:
    return UserService(user_repo, session)


def get_tenant_service(
    session: DBSession,
    tenant_repo: TenantRepo,
    role_repo: RoleAssignmentRepo,
) -> TenantService:
    return TenantService(tenant_repo, role_repo, session)


def get_role_assignment_service(
    session: DBSession,
    role_repo: RoleAssignmentRepo,
    user_repo: UserRepo,
    tenant: CurrentTenant,
) -> RoleAssignmentService:
    return RoleAssignmentService(role_repo, user_repo, session, tenant)


def get_transaction_service(session: DBSession, tenant: CurrentTenant) -> TransactionService:
    """Transactions of the current tenant only."""
    return TransactionService(TransactionRepository(session, tenant), session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
RegistrationServiceDep = Annotated[RegistrationService, Depends(get_registration_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
TenantServiceDep = Annotated[TenantService, Depends(get_tenant_service)]
RoleAssignmentServiceDep = Annotated[RoleAssignmentService, Depends(get_role_assignment_service)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
