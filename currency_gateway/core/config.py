"""
Application configuration.

Loads settings from environment variables and .env file.
A missing upstream API key stops the process at import time.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_key: Credential sent to the upstream exchange API. Required.
        upstream_base_uri: Base URI of the upstream exchange API.
        upstream_timeout_seconds: Timeout applied to every upstream call.
        host: Interface the server binds to when started from the CLI.
        port: Port the server binds to when started from the CLI.
        rate_limit_enabled: Enable per-client rate limiting.
        rate_limit_default: Rate limit applied to the conversion route.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Currency Gateway"
    version: str = "0.1.0"
    log_level: str = "INFO"

    api_key: str
    upstream_base_uri: str = "https://api.apilayer.com"
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=0, le=65535)

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Reject a blank upstream credential."""
        if not v.strip():
            raise ValueError("missing upstream API key")
        return v

    @field_validator("upstream_base_uri")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URI so endpoint paths join cleanly."""
        return v.rstrip("/")


settings = Settings()
