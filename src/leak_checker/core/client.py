"""
Have I Been Pwned breach lookup client.

Issues a single GET against the v3 breachedaccount endpoint per call.
No retries or rate limiting: a 429 or 503 is reported back to the caller.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple
from urllib.parse import quote

import aiohttp

from leak_checker.core.config import Settings, get_settings
from leak_checker.utils.exceptions import ConfigError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://haveibeenpwned.com/api/v3"
DEFAULT_USER_AGENT = "LeakChecker"
DEFAULT_TIMEOUT = 15.0


@dataclass
class BreachLookupClient:
    """Client for the breachedaccount endpoint of the HIBP v3 API."""

    api_key: str
    base_url: str = DEFAULT_API_BASE
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    session_factory: Callable[..., aiohttp.ClientSession] = field(
        default=aiohttp.ClientSession, repr=False
    )

    def __post_init__(self):
        if not self.api_key or not self.api_key.strip():
            raise ConfigError("HIBP API key required. Set HIBP_API_KEY environment variable.")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "BreachLookupClient":
        """Build a client from application settings."""
        settings = settings or get_settings()

        return cls(
            api_key=settings.api_key,
            base_url=settings.api_base_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )

    def breach_url(self, email: str) -> str:
        """Return the untruncated breach lookup URL for an address."""
        account = quote(email, safe="")

        return f"{self.base_url}/breachedaccount/{account}?truncateResponse=false"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "hibp-api-key": self.api_key,
            "user-agent": self.user_agent,
        }

    async def fetch(self, email: str) -> Tuple[int, bytes]:
        """
        Look up an email address.

        Args:
            email: A validated email address

        Returns:
            Tuple of (status_code, raw_body) for any completed exchange.
            The body is left undecoded; only a 200 body is ever parsed.

        Raises:
            TransportError: If the exchange never completed
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with self.session_factory(timeout=timeout) as session:
                async with session.get(
                    self.breach_url(email), headers=self.headers
                ) as response:
                    body = await response.read()
                    return response.status, body

        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Request timed out after {self.timeout:g} seconds"
            ) from e
        except aiohttp.ClientError as e:
            logger.warning("Breach API request failed: %s", type(e).__name__)
            raise TransportError(str(e) or type(e).__name__) from e
