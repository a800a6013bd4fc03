"""User account endpoints."""

from fastapi import APIRouter, status

from src.moneybook.api.dependencies import CurrentUser, UserServiceDep
from src.moneybook.schemas.user import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=UserRead,
    responses={401: {"description": "Not authenticated"}},
)
async def get_me(current_user: CurrentUser) -> UserRead:
    """Get current authenticated user."""
    return UserRead.model_validate(current_user)


@router.delete(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"description": "Not authenticated"}},
)
async def delete_me(current_user: CurrentUser, service: UserServiceDep) -> None:
    """Delete the account, its role assignments and its refresh tokens.

    Tenants are not deleted, even ones the user owns.
    """
    await service.delete_account(current_user)
