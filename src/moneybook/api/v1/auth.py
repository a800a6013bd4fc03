"""Authentication endpoints."""

from fastapi import APIRouter, HTTPException, status
from starlette.requests import Request

from src.moneybook.api.dependencies import AuthServiceDep, RegistrationServiceDep
from src.moneybook.core.rate_limit import get_login_rate_limit, limiter
from src.moneybook.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    RegisterResponse,
)
from src.moneybook.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Email already registered"}},
)
@limiter.limit("3/hour")
async def register(
    request: Request,
    register_data: RegisterRequest,
    service: RegistrationServiceDep,
) -> RegisterResponse:
    """Create a user account. The new user belongs to no tenant yet."""
    try:
        user = await service.register(
            email=register_data.email,
            password=register_data.password,
            full_name=register_data.full_name,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    return RegisterResponse(user=UserRead.model_validate(user))


@router.post("/login", response_model=LoginResponse, responses={401: {"description": "Invalid credentials"}})
@limiter.limit(get_login_rate_limit)
async def login(
    request: Request, login_data: LoginRequest, service: AuthServiceDep
) -> LoginResponse:
    """Authenticate user and return tokens.

    The access token lists the user's role in every tenant they belong to
    under the ``tenant_role`` claim.
    """
    result = await service.authenticate(login_data.email, login_data.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return result


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    responses={401: {"description": "Invalid or expired refresh token"}},
)
@limiter.limit("10/minute")
async def refresh(
    request: Request, refresh_data: RefreshRequest, service: AuthServiceDep
) -> RefreshResponse:
    """Rotate the refresh token and issue an access token with current tenant claims."""
    result = await service.refresh_access_token(refresh_data.refresh_token)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )

    access_token, refresh_token = result
    return RefreshResponse(access_token=access_token, refresh_token=refresh_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit("5/minute")
async def logout(request: Request, logout_data: RefreshRequest, service: AuthServiceDep) -> None:
    """Revoke refresh token (logout)."""
    await service.revoke_refresh_token(logout_data.refresh_token)
