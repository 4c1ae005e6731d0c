"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.

Settings are read once at startup and frozen. Missing required values
raise a ValidationError, which aborts the application before it serves
any request.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, EmailStr, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    # Database configuration
    database_url: str
    pool_min_size: int = 2  # Minimum connections in pool
    pool_max_size: int = 10  # Maximum connections in pool

    # Security settings
    bcrypt_cost: int = Field(default=10, ge=4, le=31)  # bcrypt work factor

    # Email delivery
    email_backend: Literal["smtp", "console"] = "smtp"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_ssl: bool = True  # Implicit TLS; STARTTLS when False
    smtp_email: EmailStr | None = None  # Sender address, validated at startup
    smtp_password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("smtp_password", "smtp_pass"),
    )
    smtp_timeout_seconds: float = Field(default=10.0, gt=0)
    email_from_name: str = "Dutchville"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 10000
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _require_smtp_credentials(self) -> "Settings":
        if self.email_backend == "smtp" and not (self.smtp_email and self.smtp_password):
            raise ValueError("smtp_email and smtp_password are required when email_backend is 'smtp'")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
