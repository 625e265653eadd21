"""
Common response models and utilities.

Shared base model configuration and the error schema.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for API shapes: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
