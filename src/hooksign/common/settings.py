"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HOOKSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Signature verification
    webhook_secret: SecretStr | None = Field(
        default=None,
        description="Shared secret for the webhook source",
    )
    signature_header: str = Field(
        default="X-Webhook-Signature",
        description="Header carrying the t=<ts>,v1=<hex> signature",
    )
    valid_for_seconds: int = Field(
        default=30,
        ge=0,
        description="Max age (seconds) between signing and verification",
    )
    protected_paths: tuple[str, ...] = Field(
        default=("/webhooks",),
        description="Path prefixes that require a valid webhook signature",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Minimum log level",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON lines instead of console output",
    )

    @property
    def secret_value(self) -> str | None:
        """Get the plain webhook secret, if configured."""
        if self.webhook_secret is None:
            return None
        return self.webhook_secret.get_secret_value()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
