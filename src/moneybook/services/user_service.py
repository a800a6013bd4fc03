"""User account service."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.logging import get_logger
from src.moneybook.models.public import User
from src.moneybook.repositories import UserRepository

logger = get_logger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def delete_account(self, user: User) -> None:
        """Delete the user with their role assignments and refresh tokens.

        Tenants the user belonged to, including ones they own, are kept.
        """
        try:
            await self.user_repo.delete_with_dependents(user.id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("User deleted", user_id=str(user.id))
