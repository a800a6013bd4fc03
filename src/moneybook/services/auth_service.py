"""Login, refresh token rotation and logout."""

import hmac
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.logging import get_logger
from src.moneybook.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_token,
    verify_password,
)
from src.moneybook.models.public import RefreshToken
from src.moneybook.repositories import RefreshTokenRepository, UserRepository
from src.moneybook.schemas.auth import LoginResponse
from src.moneybook.services.claims_service import TenantClaimsIssuer

logger = get_logger(__name__)


class TokenType:
    ACCESS = "access"
    REFRESH = "refresh"


def subject_of(payload: dict[str, Any] | None, token_type: str) -> UUID | None:
    """User id carried by a decoded token of the expected type, if any."""
    if payload is None or payload.get("type") != token_type:
        return None
    try:
        return UUID(payload.get("sub") or "")
    except ValueError:
        return None


class AuthService:
    """Issues and rotates credentials.

    Access tokens carry the user's tenant role claims as they stand at
    issuance; every refresh re-reads them from the store.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        token_repo: RefreshTokenRepository,
        claims_issuer: TenantClaimsIssuer,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.token_repo = token_repo
        self.claims_issuer = claims_issuer
        self.session = session

    async def _issue_token_pair(self, user_id: UUID) -> LoginResponse:
        """Mint an access token with current claims and store a new refresh token."""
        claims = await self.claims_issuer.issue_claims(user_id)
        refresh_token, expires_at = create_refresh_token(user_id)
        self.token_repo.add(
            RefreshToken(user_id=user_id, token_hash=hash_token(refresh_token), expires_at=expires_at)
        )
        return LoginResponse(
            access_token=create_access_token(user_id, claims),
            refresh_token=refresh_token,
        )

    async def _find_stored(self, refresh_token: str, *, usable_only: bool) -> RefreshToken | None:
        token_hash = hash_token(refresh_token)
        stored = await self.token_repo.get_by_hash(token_hash, usable_only=usable_only)
        if stored is None or not hmac.compare_digest(token_hash, stored.token_hash):
            return None
        return stored

    async def authenticate(self, email: str, password: str) -> LoginResponse | None:
        """Tokens for valid credentials of an active user, else None."""
        user = await self.user_repo.get_by_email(email.lower().strip())

        # Verify against a dummy hash for unknown emails to keep timing flat
        password_valid = verify_password(password, user.hashed_password if user else DUMMY_PASSWORD_HASH)
        if user is None or not password_valid or not user.is_active:
            return None

        try:
            tokens = await self._issue_token_pair(user.id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User logged in", user_id=str(user.id))
        return tokens

    async def refresh_access_token(self, refresh_token: str) -> tuple[str, str] | None:
        """Revoke ``refresh_token`` and return a fresh (access, refresh) pair.

        The new access token's tenant claims reflect the role assignments at
        the time of the refresh. Returns None for an unknown, revoked, expired
        or foreign token, or an inactive user.
        """
        user_id = subject_of(decode_token(refresh_token), TokenType.REFRESH)
        if user_id is None:
            return None

        stored = await self._find_stored(refresh_token, usable_only=True)
        if stored is None or stored.user_id != user_id:
            return None

        user = await self.user_repo.get_by_id(user_id)
        if user is None or not user.is_active:
            return None

        try:
            stored.revoked = True
            tokens = await self._issue_token_pair(user_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return tokens.access_token, tokens.refresh_token

    async def revoke_refresh_token(self, refresh_token: str) -> bool:
        """Logout. Returns whether the token was known."""
        stored = await self._find_stored(refresh_token, usable_only=False)
        if stored is None:
            return False
        try:
            stored.revoked = True
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return True
