"""Rate limiting for credential endpoints.

In-memory storage (per process). Disabled in the testing environment.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.moneybook.core.config import get_settings
from src.moneybook.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Rate limit by client IP only.

    Never include user-controlled headers in the key; rotating them would
    create unlimited buckets.
    """
    return get_remote_address(request) or "unknown"


def get_login_rate_limit() -> str:
    return get_settings().login_rate_limit


def create_limiter() -> Limiter:
    settings = get_settings()
    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)
    return Limiter(key_func=get_rate_limit_key)


limiter = create_limiter()
