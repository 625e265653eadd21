"""Shared router helpers."""

from researcher.api.routers.router_utils.error_handling import handle_research_errors
from researcher.api.routers.router_utils.validators import require_field

__all__ = ["handle_research_errors", "require_field"]
