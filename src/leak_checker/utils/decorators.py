"""Decorators for error handling and monitoring."""

import asyncio
import functools
from typing import Callable, TypeVar

import sentry_sdk

from leak_checker.core.config import get_settings
from leak_checker.utils.exceptions import capture_exception

F = TypeVar("F", bound=Callable)


def sentry_exception_catcher(func: F) -> F:
    """
    Report an exception escaping a route handler, then re-raise it.

    The report is tagged with the handler name. Request arguments are not
    attached, so a submitted address never reaches Sentry.
    """
    context = {"route": func.__name__}

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            capture_exception(e, context)
            raise

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            capture_exception(e, context)
            raise

    if asyncio.iscoroutinefunction(func):
        return async_wrapper  # type: ignore
    return sync_wrapper  # type: ignore


def init_sentry() -> bool:
    """Initialize Sentry SDK if configured. Returns True when enabled."""
    settings = get_settings()

    if not settings.sentry_dsn:
        return False

    # Lookups carry user email addresses; never ship them as PII.
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
    return True
