"""
Search provider configuration settings.

Settings for the Exa neural/keyword web-search API.

Dependencies: pydantic_settings
System role: Search provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """Exa search configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EXA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Exa API key",
    )
    num_results: int = Field(
        default=10,
        gt=0,
        description="Results requested for profile and web searches",
    )
    similar_num_results: int = Field(
        default=15,
        gt=0,
        description="Results requested from find-similar before filtering",
    )
    similar_max_results: int = Field(
        default=10,
        gt=0,
        description="Similar profiles returned after filtering",
    )
    video_num_results: int = Field(
        default=10,
        gt=0,
        description="Results requested for video searches",
    )
