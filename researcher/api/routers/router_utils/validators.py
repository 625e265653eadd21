"""
Request validation utilities.

Presence checks the request schemas leave to the router so that a missing
field is a 400 naming the field rather than a schema error.

System role: Request field validation
"""

from typing import TypeVar

from researcher.core.exceptions import MissingFieldError

T = TypeVar("T")


def require_field(value: T | None, field: str) -> T:
    """
    Ensure a request field is present and, for strings, not blank.

    Args:
        value: Field value from the request model
        field: Wire name of the field, used in the error message

    Returns:
        The value, with surrounding whitespace stripped for strings

    Raises:
        MissingFieldError: Value is None or a blank string
    """
    if value is None:
        raise MissingFieldError(field)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise MissingFieldError(field)
    return value
