"""Health check API endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from leak_checker.core.config import Settings, get_settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    api_key_configured: bool
    sentry_enabled: bool


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Health check endpoint (no auth required).

    Reports whether the breach API key is configured. A missing key is
    not a failure: lookups answer with a configuration error instead.
    """
    return HealthResponse(
        status="ok",
        api_key_configured=settings.has_api_key,
        sentry_enabled=bool(settings.sentry_dsn),
    )
