"""Async database engine, created lazily and shared by the process."""

import ssl
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.moneybook.core.config import get_settings

_engine: AsyncEngine | None = None


def build_ssl_context(ssl_mode: str) -> ssl.SSLContext | None:
    """Map a libpq-style ``sslmode`` onto an ``ssl.SSLContext`` for asyncpg.

    ``disable`` gives no context. ``prefer`` and ``require`` encrypt without
    checking the certificate. ``verify-ca`` checks it and ``verify-full``
    also checks the hostname.
    """
    if ssl_mode == "disable":
        return None
    context = ssl.create_default_context()
    verify = ssl_mode in ("verify-ca", "verify-full")
    context.check_hostname = ssl_mode == "verify-full"
    context.verify_mode = ssl.CERT_REQUIRED if verify else ssl.CERT_NONE
    return context


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        settings = get_settings()
        connect_args: dict[str, Any] = {}
        ssl_context = build_ssl_context(settings.database_ssl_mode)
        if ssl_context is not None:
            connect_args["ssl"] = ssl_context
        _engine = create_async_engine(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
    return _engine


async def dispose_engine() -> None:
    """Close pooled connections. Called from the application lifespan."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
