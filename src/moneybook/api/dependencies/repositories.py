"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.moneybook.api.dependencies.db import DBSession
from src.moneybook.repositories import (
    RefreshTokenRepository,
    RoleAssignmentRepository,
    TenantRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_token_repository(session: DBSession) -> RefreshTokenRepository:
    return RefreshTokenRepository(session)


def get_tenant_repository(session: DBSession) -> TenantRepository:
    return TenantRepository(session)


def get_role_assignment_repository(session: DBSession) -> RoleAssignmentRepository:
    return RoleAssignmentRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
TokenRepo = Annotated[RefreshTokenRepository, Depends(get_token_repository)]
TenantRepo = Annotated[TenantRepository, Depends(get_tenant_repository)]
RoleAssignmentRepo = Annotated[RoleAssignmentRepository, Depends(get_role_assignment_repository)]
