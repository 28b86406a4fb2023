"""Runtime configuration for cli-metrics."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="CLI_METRICS_", env_file=".env", extra="ignore")

    app_name: str = "cli-metrics"
    log_level: str = "WARNING"
    telemetry_enabled: bool = True
    metrics_file: str | None = Field(
        default=None,
        description="Append heartbeats as JSON lines to this file.",
    )
    stdout: bool = False
    http_enabled: bool = True
    http_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Timeout applied by the HTTP client to each usage POST.",
    )


settings = Settings()
