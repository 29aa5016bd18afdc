"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from leak_checker.api.healthcheck import router as healthcheck_router
from leak_checker.api.routes import router
from leak_checker.core.config import get_settings
from leak_checker.utils.decorators import init_sentry

# Configure logging for the application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logging.getLogger("leak_checker").setLevel(get_settings().log_level.upper())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan handler."""
    # Startup
    sentry_enabled = init_sentry()
    settings = get_settings()

    logger.info("Leak Checker starting...")
    logger.info(f"Breach API: {settings.api_base_url}")
    logger.info(f"API key: {'configured' if settings.has_api_key else 'MISSING'}")
    logger.info(f"Sentry: {'enabled' if sentry_enabled else 'disabled'}")

    if not settings.has_api_key:
        logger.warning("HIBP_API_KEY is not set; lookups will report a configuration error")

    yield

    # Shutdown
    logger.info("Leak Checker shutting down...")


app = FastAPI(
    title="Leak Checker",
    description="Check whether an email address appears in known data breaches",
    version="1.0.0",
    lifespan=lifespan,
)

# Include API routes
app.include_router(router)
app.include_router(healthcheck_router)
