"""Mapping of breach API responses to lookup outcomes."""

import json
from typing import Optional, Union

from leak_checker.core.normalizer import normalize_breaches
from leak_checker.core.outcomes import (
    ApiError,
    ApiErrorKind,
    Breaches,
    LookupOutcome,
    NoBreaches,
)

UNEXPECTED_BODY_MESSAGE = "Unexpected response from API."

# HIBP v3 status semantics. 200 and 404 are handled separately.
STATUS_ERRORS: dict[int, tuple[ApiErrorKind, str]] = {
    400: (ApiErrorKind.BAD_REQUEST, "Bad request. Check the email format."),
    401: (ApiErrorKind.UNAUTHORIZED, "Unauthorized. Check your API key."),
    403: (ApiErrorKind.FORBIDDEN, "Forbidden. Request was rejected by the API."),
    429: (ApiErrorKind.RATE_LIMITED, "Rate limit exceeded. Try again in a moment."),
    503: (ApiErrorKind.SERVICE_UNAVAILABLE, "Service unavailable. Try again later."),
}


def network_error(message: str) -> ApiError:
    """Outcome for an exchange that never completed."""
    return ApiError(ApiErrorKind.NETWORK_ERROR, f"Network error: {message}")


def _parse_breach_list(body: Optional[Union[bytes, str]]) -> Optional[list]:
    """Decode a UTF-8 JSON array body, or None if it is anything else."""
    if body is None:
        return None

    try:
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        data = json.loads(body)
    except ValueError:
        return None

    return data if isinstance(data, list) else None


def classify(
    status: Optional[int],
    body: Optional[Union[bytes, str]] = None,
    transport_error: Optional[str] = None,
) -> LookupOutcome:
    """
    Map an HTTP status, body and transport failure to a LookupOutcome.

    The body is only inspected for status 200.

    Args:
        status: HTTP status code, None if the exchange never completed
        body: Raw response body, bytes or text
        transport_error: Human-readable transport failure, if any

    Returns:
        The classified LookupOutcome
    """
    if transport_error is not None or status is None:
        return network_error(transport_error or "no response received")

    if status == 200:
        items = _parse_breach_list(body)

        if items is None:
            return ApiError(ApiErrorKind.UNEXPECTED_BODY, UNEXPECTED_BODY_MESSAGE)
        if not items:
            return NoBreaches()

        return Breaches(tuple(normalize_breaches(items)))

    if status == 404:
        return NoBreaches()

    if status in STATUS_ERRORS:
        kind, message = STATUS_ERRORS[status]
        return ApiError(kind, message)

    return ApiError(ApiErrorKind.UNEXPECTED_STATUS, f"Unexpected HTTP status: {status}")
