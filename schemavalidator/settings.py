"""Application settings using pydantic-settings.

Loads configuration from ``SCHEMAVALIDATOR_*`` environment variables
with .env file support. Only the CLI and logging setup read settings;
the validator itself is a pure function of (schema, value).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from schemavalidator.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAVALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "testing", "production"] = "development"
    debug: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level for schemavalidator loggers and the console handler",
    )

    # CLI output
    output_format: Literal["table", "json"] = Field(
        default="table",
        description="Default output format of the `validate` command",
    )
    max_table_rows: int = Field(
        default=200,
        ge=1,
        description="Maximum number of violations printed in table mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded once and reused.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid schemavalidator settings: {e}") from e
