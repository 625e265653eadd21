"""
LLM configuration settings.

Settings for the OpenAI chat models used by the enrichment writer.

Dependencies: pydantic_settings
System role: LLM provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """OpenAI chat model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="OpenAI API key",
    )
    model: str = Field(
        default="gpt-4.1",
        description="Model for free-text sections (summary, roast, praise)",
    )
    structured_model: str = Field(
        default="gpt-4.1-mini",
        description="Model for schema-constrained sections (career, fun facts)",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Per-request timeout for LLM calls",
    )
