"""Lookup orchestration: validate, fetch, classify."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple

from leak_checker.core.classifier import UNEXPECTED_BODY_MESSAGE, classify, network_error
from leak_checker.core.client import BreachLookupClient
from leak_checker.core.config import Settings, get_settings
from leak_checker.core.outcomes import (
    ApiError,
    ApiErrorKind,
    LookupOutcome,
    ValidationError,
    outcome_tag,
)
from leak_checker.core.validator import validate_email_input
from leak_checker.utils.exceptions import TransportError, capture_exception

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "Missing API key. Set HIBP_API_KEY in your environment."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error while contacting the API."


class BreachFetcher(Protocol):
    """Protocol for the outbound breach lookup."""

    async def fetch(self, email: str) -> Tuple[int, bytes]: ...


@dataclass
class LookupService:
    """Runs one breach lookup per call and always returns an outcome."""

    settings: Settings = field(default_factory=get_settings)
    client: Optional[BreachFetcher] = None

    def __post_init__(self):
        if self.client is None and self.settings.has_api_key:
            self.client = BreachLookupClient.from_settings(self.settings)

    async def lookup(self, raw_email: Optional[str]) -> LookupOutcome:
        """
        Check a submitted email address against the breach API.

        Never raises: every failure is converted into a LookupOutcome.
        """
        outcome = await self._lookup(raw_email)
        logger.info("Lookup finished: %s", outcome_tag(outcome))

        return outcome

    async def _lookup(self, raw_email: Optional[str]) -> LookupOutcome:
        checked = validate_email_input(raw_email)

        if isinstance(checked, ValidationError):
            return checked

        if not self.settings.has_api_key or self.client is None:
            return ApiError(ApiErrorKind.CONFIG_ERROR, MISSING_API_KEY_MESSAGE)

        try:
            status, body = await self.client.fetch(checked.email)
        except TransportError as e:
            return network_error(str(e))
        except Exception as e:  # pylint: disable=broad-exception-caught
            capture_exception(e, {"operation": "breach_lookup"})
            return ApiError(ApiErrorKind.UNEXPECTED_STATUS, UNEXPECTED_ERROR_MESSAGE)

        try:
            return classify(status, body)
        except Exception as e:  # pylint: disable=broad-exception-caught
            capture_exception(e, {"operation": "classify", "status": status})
            return ApiError(ApiErrorKind.UNEXPECTED_BODY, UNEXPECTED_BODY_MESSAGE)


# Default service instance
_lookup_service: Optional[LookupService] = None


def get_lookup_service() -> LookupService:
    """Get or create the default lookup service."""
    global _lookup_service  # pylint: disable=global-statement

    if _lookup_service is None:
        _lookup_service = LookupService()

    return _lookup_service


def set_lookup_service(service: LookupService) -> None:
    """Set a custom lookup service (useful for testing)."""
    global _lookup_service  # pylint: disable=global-statement

    _lookup_service = service


def reset_lookup_service() -> None:
    """Reset the lookup service (useful for testing)."""
    global _lookup_service  # pylint: disable=global-statement

    _lookup_service = None
