"""Repository for User entity."""

from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.moneybook.models.public import RefreshToken, User, UserTenantRoleAssignment
from src.moneybook.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        user = await self.get_by_email(email)
        return user is not None

    async def delete_with_dependents(self, user_id: UUID) -> None:
        """Delete a user together with their role assignments and refresh tokens.

        Tenants and other users' assignments are left untouched.
        """
        await self.session.execute(
            delete(UserTenantRoleAssignment).where(
                UserTenantRoleAssignment.user_id == user_id  # type: ignore[arg-type]
            )
        )
        await self.session.execute(
            delete(RefreshToken).where(RefreshToken.user_id == user_id)  # type: ignore[arg-type]
        )
        await self.session.execute(delete(User).where(User.id == user_id))  # type: ignore[arg-type]
