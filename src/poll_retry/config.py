"""
Configuration settings for Poll Retry.

All settings are loaded from environment variables (prefix ``POLL_RETRY_``)
with sensible defaults. Use a .env file for local development.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POLL_RETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "poll-retry"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Retry Defaults ===
    DEFAULT_INTERVAL_SECONDS: float = Field(default=0.5, ge=0)  # Pause between attempts
    DEFAULT_TIMEOUT_SECONDS: float = Field(default=3.0, ge=0)  # Bound for during()
    DEFAULT_MAX_ATTEMPTS: int = Field(default=5, ge=1)  # Bound for times()

    # === Monitoring ===
    METRICS_ENABLED: bool = True


# Global settings instance
settings = Settings()
