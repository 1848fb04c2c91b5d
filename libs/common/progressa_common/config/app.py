"""Application settings configuration."""

from functools import lru_cache

from .base import BaseAppSettings


class AppSettings(BaseAppSettings):
    """General application configuration."""

    APP_NAME: str = "Progressa Certificate Service"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    STRUCTURED_LOGGING: bool = True


@lru_cache
def get_app_settings() -> AppSettings:
    """Get application settings."""
    return AppSettings()
