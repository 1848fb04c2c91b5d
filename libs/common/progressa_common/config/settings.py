"""Main application settings container."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from .app import AppSettings
from .certificate import CertificateSettings
from .workflow import WorkflowSettings


class Settings(BaseSettings):
    """Main application settings container."""

    app: AppSettings = Field(default_factory=AppSettings)
    workflow: WorkflowSettings = Field(default_factory=WorkflowSettings)
    certificate: CertificateSettings = Field(default_factory=CertificateSettings)

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Get the main application settings."""
    return Settings(
        app=AppSettings(),
        workflow=WorkflowSettings(),
        certificate=CertificateSettings(),
    )
