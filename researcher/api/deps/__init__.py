"""FastAPI dependency providers."""

from researcher.api.deps.dependencies import (
    get_enrichment_service,
    get_profile_search_service,
    get_research_service,
    get_service_cache,
)

__all__ = [
    "get_enrichment_service",
    "get_profile_search_service",
    "get_research_service",
    "get_service_cache",
]
