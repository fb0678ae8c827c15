"""
Client Settings
===============

Client configuration and credential loading using Pydantic Settings.
Values are read from ``HCTI_``-prefixed environment variables or a ``.env`` file.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://hcti.io"


class ClientSettings(BaseSettings):
    """Client settings with environment variable support."""

    # Credentials
    api_id: Optional[str] = Field(default=None, description="Account (user) id, HCTI_API_ID")
    api_key: Optional[str] = Field(default=None, description="Secret API key, HCTI_API_KEY")

    # Service Configuration
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Rendering service base URL")
    request_timeout: float = Field(
        default=30.0, gt=0, description="Default transport timeout in seconds"
    )

    # Runtime Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="HCTI_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> ClientSettings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = ClientSettings()
    return settings


def reload_settings() -> ClientSettings:
    """Reload settings from environment."""
    global settings
    settings = ClientSettings()
    return settings
