"""Authentication dependencies."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.moneybook.api.dependencies.repositories import UserRepo
from src.moneybook.core.logging import bind_user_context
from src.moneybook.core.security import decode_token
from src.moneybook.core.tenancy.claims import ClaimsPrincipal, tenant_claims_from_payload
from src.moneybook.models.public import User
from src.moneybook.services.auth_service import TokenType, subject_of


@dataclass(frozen=True)
class Authentication:
    """A validated access token and the active user it belongs to."""

    user: User
    principal: ClaimsPrincipal


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_authentication(
    user_repo: UserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> Authentication:
    """Resolve the bearer access token to its active user and tenant claims.

    Any failure is a 401; tenant claims are not evaluated here.
    """
    scheme, _, token = (authorization or "").partition(" ")
    if scheme != "Bearer" or not token:
        raise _unauthorized("Missing or invalid authorization header")

    payload = decode_token(token)
    user_id = subject_of(payload, TokenType.ACCESS)
    if payload is None or user_id is None:
        raise _unauthorized("Invalid or expired token")

    user = await user_repo.get_by_id(user_id)
    if user is None or not user.is_active:
        raise _unauthorized("User not found or inactive")

    bind_user_context(user.id, user.email)

    principal = ClaimsPrincipal(
        user_id=user.id,
        tenant_claims=tuple(tenant_claims_from_payload(payload)),
    )
    return Authentication(user=user, principal=principal)


async def get_current_user(authentication: Annotated[Authentication, Depends(get_authentication)]) -> User:
    return authentication.user


async def get_current_principal(
    authentication: Annotated[Authentication, Depends(get_authentication)],
) -> ClaimsPrincipal:
    return authentication.principal


CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentPrincipal = Annotated[ClaimsPrincipal, Depends(get_current_principal)]
