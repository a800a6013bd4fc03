"""Password hashing, signed JWTs and refresh token digests."""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from hashlib import sha256
from typing import Any
from uuid import UUID, uuid4

import argon2
from jose import JWTError, jwt

from src.moneybook.core.config import get_settings
from src.moneybook.core.tenancy.claims import TENANT_ROLE_CLAIM, TenantClaim

_settings = get_settings()
_password_hasher = argon2.PasswordHasher(
    time_cost=_settings.argon2_time_cost,
    memory_cost=_settings.argon2_memory_cost,
    parallelism=_settings.argon2_parallelism,
)

# Checked when the email is unknown so login timing does not reveal
# which addresses are registered.
DUMMY_PASSWORD_HASH = _password_hasher.hash("moneybook-dummy-password")


def hash_token(token: str) -> str:
    """SHA-256 digest stored in place of the refresh token itself."""
    return sha256(token.encode()).hexdigest()


def hash_password(password: str) -> str:
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """False for a wrong password or an unreadable hash."""
    try:
        return _password_hasher.verify(hashed, password)
    except (argon2.exceptions.VerifyMismatchError, argon2.exceptions.InvalidHashError):
        return False


def _sign(claims: dict[str, Any], lifetime: timedelta) -> tuple[str, datetime]:
    """Sign ``claims`` with the configured secret, expiring after ``lifetime``."""
    settings = get_settings()
    expires_at = datetime.now(UTC) + lifetime
    token: str = jwt.encode(  # type: ignore[assignment]
        {**claims, "exp": expires_at},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return token, expires_at


def create_access_token(
    subject: str | UUID,
    tenant_claims: Sequence[TenantClaim] = (),
    expires_delta: timedelta | None = None,
) -> str:
    """Access token for ``subject`` with one ``tenant_role`` entry per tenant claim."""
    lifetime = expires_delta or timedelta(minutes=get_settings().access_token_expire_minutes)
    token, _ = _sign(
        {
            "sub": str(subject),
            "type": "access",
            TENANT_ROLE_CLAIM: [claim.encode() for claim in tenant_claims],
        },
        lifetime,
    )
    return token


def create_refresh_token(subject: str | UUID) -> tuple[str, datetime]:
    """Refresh token for ``subject`` and its expiry as a naive UTC datetime.

    Refresh tokens carry no tenant claims; claims are re-read from the store
    on every refresh. ``jti`` keeps two tokens minted in the same second
    distinct.
    """
    token, expires_at = _sign(
        {"sub": str(subject), "type": "refresh", "jti": uuid4().hex},
        timedelta(days=get_settings().refresh_token_expire_days),
    )
    return token, expires_at.replace(tzinfo=None)


def decode_token(token: str) -> dict[str, Any] | None:
    """Payload of a valid, unexpired token signed with our secret, else None."""
    settings = get_settings()
    try:
        payload: dict[str, Any] = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    return payload
