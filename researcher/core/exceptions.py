"""
Exception hierarchy for the person researcher application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ResearcherException(Exception):
    """Base exception for all researcher application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MissingFieldError(ResearcherException):
    """Raised when a required request field is absent or blank."""

    def __init__(self, field: str) -> None:
        """
        Initialize missing field error.

        Args:
            field: Wire name of the missing field (e.g. "searchQuery")
        """
        self.field = field
        super().__init__(f"{field} is required")

    def __str__(self) -> str:
        return self.message


class SearchProviderError(ResearcherException):
    """Raised when the web-search provider call fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize search provider error.

        Args:
            message: Error message
            operation: Search operation that failed (search, find_similar)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class EnrichmentError(ResearcherException):
    """Raised when an LLM enrichment produces no usable output."""

    def __init__(
        self,
        message: str,
        section: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize enrichment error.

        Args:
            message: Error message
            section: Dossier section that failed (career, fun_facts, ...)
            details: Additional context
        """
        self.section = section
        super().__init__(message, details)
