"""Centralized configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def _strip_slash(s: str) -> str:
    """Remove trailing slashes from a base URL."""
    return s.strip().rstrip("/")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Breach API configuration
    hibp_api_key: Optional[str] = None
    hibp_api_base: str = "https://haveibeenpwned.com/api/v3"
    user_agent: str = "LeakChecker"
    request_timeout: float = 15.0

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    @property
    def has_api_key(self) -> bool:
        """Check if a non-blank API key is configured."""
        return bool(self.hibp_api_key and self.hibp_api_key.strip())

    @property
    def api_key(self) -> str:
        """Return the API key with surrounding whitespace removed."""
        return (self.hibp_api_key or "").strip()

    @property
    def api_base_url(self) -> str:
        """Return the breach API base URL without a trailing slash."""
        return _strip_slash(self.hibp_api_base)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
