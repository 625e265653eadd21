"""API routers."""

from .enrichment import router as enrichment_router
from .health import router as health_router
from .research import router as research_router
from .search import router as search_router

__all__ = [
    "enrichment_router",
    "health_router",
    "research_router",
    "search_router",
]
