"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import os
from dataclasses import dataclass, field
from typing import Optional, Union

import pytest

from leak_checker.core.config import Settings, get_settings

# Keep test runs away from a real Sentry project
os.environ.setdefault("SENTRY_DSN", "")


@dataclass
class FakeBreachClient:
    """Fake breach lookup client returning a canned response."""

    status: int = 404
    body: Union[bytes, str] = b""
    error: Optional[Exception] = None
    calls: list[str] = field(default_factory=list)

    async def fetch(self, email: str) -> tuple[int, Union[bytes, str]]:
        self.calls.append(email)
        if self.error is not None:
            raise self.error
        return self.status, self.body


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Clear the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    """Provide test settings with an API key configured."""
    return Settings(
        hibp_api_key="test-api-key",
        hibp_api_base="https://hibp.test/api/v3",
        user_agent="LeakChecker-Test",
        request_timeout=15.0,
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def keyless_settings():
    """Provide test settings without an API key."""
    return Settings(hibp_api_key=None, sentry_dsn=None, _env_file=None)


@pytest.fixture
def fake_client():
    """Create a fake breach client (404 by default)."""
    return FakeBreachClient()
