"""
Configuration Management

Uses Pydantic BaseSettings to load configuration from environment variables.
All settings can be overridden via .env file or environment variables.

Environment Variables:
    APP_ENV: Environment name (development/staging/production)
    DEBUG: Enable debug mode (default: False)
    ALLOW_DOUBLE_BOOKING: Accept several appointments on one slot (default: False)
    APPOINTMENT_ID_PREFIX: Prefix of generated appointment ids (default: A)
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Environment
    app_env: Literal["development", "staging", "production"] = "development"
    """Current application environment.

    Options:
    - development: Local development, verbose errors, docs enabled
    - staging: Pre-production testing environment
    - production: Live environment, internal errors hidden
    """

    debug: bool = False
    """Enable debug mode.

    When True:
    - DEBUG log level
    - Request durations are logged
    """

    # Application Configuration
    app_name: str = "med-center"
    """Application name."""

    host: str = "0.0.0.0"
    """Host to bind the application server."""

    port: int = 8000
    """Port to bind the application server."""

    # Scheduling
    allow_double_booking: bool = False
    """Accept a booking on a slot already held by another appointment.

    Off by default: a second booking on the same slot is rejected with
    SlotTakenError. Turning it on lets show rate and completeness count
    several appointments per slot.
    """

    appointment_id_prefix: str = "A"
    """Prefix of appointment ids ("A0", "A1", ...)."""

    # Pydantic configuration
    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached settings instance

    Example:
        >>> from medcenter.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.allow_double_booking)
        False
    """
    return Settings()


# Module-level settings instance for easy imports
settings = get_settings()
