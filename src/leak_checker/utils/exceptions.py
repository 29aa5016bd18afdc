"""Custom exceptions and error reporting."""

import logging
from typing import Optional

import sentry_sdk

from leak_checker.core.config import get_settings

logger = logging.getLogger(__name__)

# Context keys that may carry the looked-up address or the API key.
SENSITIVE_KEYS = frozenset({"email", "raw_email", "api_key", "hibp_api_key"})

# Context keys promoted to searchable Sentry tags.
TAG_KEYS = ("operation", "route")


class LeakCheckerError(Exception):
    """Base exception for Leak Checker errors."""


class TransportError(LeakCheckerError):
    """The HTTP exchange with the breach API never completed."""


class ConfigError(LeakCheckerError):
    """Required configuration is missing."""


def scrub_context(context: Optional[dict]) -> dict:
    """Drop entries that could identify the user or leak the API key."""
    if not context:
        return {}

    return {k: v for k, v in context.items() if k.lower() not in SENSITIVE_KEYS}


def capture_exception(
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "error",
) -> None:
    """
    Log an exception and forward it to Sentry when SENTRY_DSN is set.

    Sensitive context entries are removed first. `operation` and `route`
    become Sentry tags; everything else is attached as a `lookup` context.

    Args:
        exception: The exception to capture
        context: Additional context to include
        level: Log level ('error', 'warning', 'info')
    """
    safe_context = scrub_context(context)

    log_func = getattr(logger, level, logger.error)
    log_func(
        "%s: %s %s",
        type(exception).__name__,
        exception,
        safe_context,
        exc_info=True,
    )

    if not get_settings().sentry_dsn:
        return

    with sentry_sdk.new_scope() as scope:
        scope.set_level(level)
        for key in TAG_KEYS:
            if key in safe_context:
                scope.set_tag(key, str(safe_context[key]))
        if safe_context:
            scope.set_context("lookup", safe_context)
        sentry_sdk.capture_exception(exception)
