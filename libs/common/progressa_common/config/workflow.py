"""Workflow engine configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkflowSettings(BaseSettings):
    """Workflow execution configuration."""

    # Temporal-specific settings
    TEMPORAL_SERVER_URL: str = "localhost:7233"
    TEMPORAL_NAMESPACE: str = "default"
    TEMPORAL_TASK_QUEUE: str = "progressa-certificates"

    # Worker settings
    TEMPORAL_MAX_CONCURRENT_ACTIVITIES: int = 10
    TEMPORAL_MAX_CONCURRENT_WORKFLOWS: int = 5

    model_config = SettingsConfigDict(env_prefix="WORKFLOW__", env_file=".env", extra="ignore")
