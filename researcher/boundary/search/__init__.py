"""Web search boundary (Exa)."""

from researcher.boundary.search.exa_client import ExaSearchClient
from researcher.boundary.search.search_schemas import SearchHit

__all__ = ["ExaSearchClient", "SearchHit"]
