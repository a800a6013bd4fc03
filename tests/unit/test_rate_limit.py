"""Tests for credential endpoint rate limiting (src/moneybook/core/rate_limit.py)."""

from unittest.mock import MagicMock, patch

import pytest
from starlette.requests import Request

from src.moneybook.core.config import get_settings
from src.moneybook.core.rate_limit import (
    create_limiter,
    get_login_rate_limit,
    get_rate_limit_key,
    limiter,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_request() -> MagicMock:
    request = MagicMock(spec=Request)
    request.headers = {}
    request.client = MagicMock()
    request.client.host = "192.168.1.100"
    return request


@pytest.fixture
def mock_settings() -> MagicMock:
    """Settings for a non-testing environment, where limiting is active."""
    settings = MagicMock()
    settings.app_env = "development"
    settings.login_rate_limit = "5/minute"
    return settings


class TestGetRateLimitKey:
    def test_returns_client_ip(self, mock_request: MagicMock) -> None:
        with patch("src.moneybook.core.rate_limit.get_remote_address", return_value="192.168.1.100"):
            assert get_rate_limit_key(mock_request) == "192.168.1.100"

    def test_ignores_tenant_path_and_headers(self, mock_request: MagicMock) -> None:
        mock_request.headers = {"X-Forwarded-For": "10.9.9.9", "Authorization": "Bearer abc"}

        with patch("src.moneybook.core.rate_limit.get_remote_address", return_value="192.168.1.100"):
            assert get_rate_limit_key(mock_request) == "192.168.1.100"

    def test_returns_unknown_when_ip_not_available(self, mock_request: MagicMock) -> None:
        with patch("src.moneybook.core.rate_limit.get_remote_address", return_value=None):
            assert get_rate_limit_key(mock_request) == "unknown"


class TestLimiterConfiguration:
    def test_login_limit_comes_from_settings(self) -> None:
        assert get_login_rate_limit() == get_settings().login_rate_limit

    def test_login_limit_follows_patched_settings(self, mock_settings: MagicMock) -> None:
        with patch("src.moneybook.core.rate_limit.get_settings", return_value=mock_settings):
            assert get_login_rate_limit() == "5/minute"

    def test_disabled_in_testing_environment(self) -> None:
        assert limiter.enabled is False
        assert create_limiter().enabled is False

    def test_enabled_outside_testing(self, mock_settings: MagicMock) -> None:
        with patch("src.moneybook.core.rate_limit.get_settings", return_value=mock_settings):
            assert create_limiter().enabled is True
