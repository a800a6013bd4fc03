"""Root test fixtures shared across all test types.

Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_SSL_MODE", "disable")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters-long")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator

import pytest

from src.moneybook.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def live_check_disabled(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Authorize from token claims alone, without re-reading role assignments."""
    monkeypatch.setenv("TENANT_AUTHZ_LIVE_CHECK", "false")
    get_settings.cache_clear()
    yield
    monkeypatch.delenv("TENANT_AUTHZ_LIVE_CHECK")
    get_settings.cache_clear()
