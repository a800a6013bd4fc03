"""Refresh token storage. Only SHA-256 digests of tokens are kept."""

from sqlmodel import select

from src.moneybook.models.base import utc_now
from src.moneybook.models.public import RefreshToken
from src.moneybook.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    model = RefreshToken

    async def get_by_hash(self, token_hash: str, *, usable_only: bool = False) -> RefreshToken | None:
        """Look up a token by digest.

        With ``usable_only`` the row must be unrevoked and unexpired, and it
        is locked so two concurrent refreshes cannot both rotate it.
        """
        query = select(RefreshToken).where(RefreshToken.token_hash == token_hash)
        if usable_only:
            query = query.where(
                RefreshToken.revoked == False,  # noqa: E712
                RefreshToken.expires_at > utc_now(),
            ).with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
