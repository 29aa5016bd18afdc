"""API routes for the Leak Checker service."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from leak_checker.api.models import LookupRequest, LookupResponse
from leak_checker.core.lookup import LookupService, get_lookup_service
from leak_checker.core.outcomes import LookupOutcome
from leak_checker.utils.decorators import sentry_exception_catcher
from leak_checker.web.presenter import render_page

router = APIRouter()


@dataclass
class RouteDependencies:
    """Dependencies for route handlers."""

    service: LookupService = field(default_factory=get_lookup_service)
    render_page_fn: Callable[[Optional[str], Optional[LookupOutcome]], str] = render_page


# Global dependencies instance (can be overridden for testing)
_dependencies: Optional[RouteDependencies] = None


def get_dependencies() -> RouteDependencies:
    """Get the current route dependencies."""
    global _dependencies  # pylint: disable=global-statement
    if _dependencies is None:
        _dependencies = RouteDependencies()
    return _dependencies


def set_dependencies(deps: RouteDependencies) -> None:
    """Set custom dependencies (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = deps


def reset_dependencies() -> None:
    """Reset dependencies to default (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = None


@router.get("/", response_class=HTMLResponse)
async def index(deps: RouteDependencies = Depends(get_dependencies)):
    """Blank lookup form."""
    return HTMLResponse(deps.render_page_fn(None, None))


@router.post("/", response_class=HTMLResponse)
@sentry_exception_catcher
async def submit(
    email: str = Form(default=""),
    deps: RouteDependencies = Depends(get_dependencies),
):
    """
    Form submission endpoint.

    Always answers 200; the outcome is rendered in the page and the
    submitted text is echoed back into the form.
    """
    outcome = await deps.service.lookup(email)

    return HTMLResponse(deps.render_page_fn(email, outcome))


@router.post("/api/lookup", response_model=LookupResponse)
@sentry_exception_catcher
async def api_lookup(
    request: LookupRequest,
    deps: RouteDependencies = Depends(get_dependencies),
) -> LookupResponse:
    """
    JSON lookup endpoint.

    Answers 200 with the classified outcome for any JSON object body; a
    non-string `email` counts as missing. A body that is not a JSON object
    is rejected by FastAPI with 422.
    """
    outcome = await deps.service.lookup(request.email)

    return LookupResponse.from_outcome((request.email or "").strip(), outcome)
