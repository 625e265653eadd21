"""
Base configuration settings.

Shared `.env` loading plus the process-wide switches (log level and
FastAPI debug mode) that every settings class inherits.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Common settings for the researcher service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Run FastAPI in debug mode (tracebacks in error pages)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level name passed to configure_logging",
    )
