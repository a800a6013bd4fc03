"""Registration service - creates user accounts.

A new user belongs to no tenant until they create one or are invited.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.logging import get_logger
from src.moneybook.core.security import hash_password
from src.moneybook.models.public import User
from src.moneybook.repositories import UserRepository

logger = get_logger(__name__)


class RegistrationService:
    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def register(self, email: str, password: str, full_name: str) -> User:
        """Register a new user.

        Raises:
            ValueError: If the email is already registered.
        """
        email = email.lower().strip()
        if await self.user_repo.exists_by_email(email):
            raise ValueError("Email already registered")

        user = User(
            email=email,
            hashed_password=hash_password(password),
            full_name=full_name,
        )
        self.user_repo.add(user)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValueError("Email already registered") from e

        await self.session.refresh(user)
        logger.info("User registered", user_id=str(user.id))
        return user
