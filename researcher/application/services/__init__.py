"""Application services."""

from researcher.application.services.enrichment_service import EnrichmentService
from researcher.application.services.profile_search_service import ProfileSearchService
from researcher.application.services.research_service import ResearchService

__all__ = ["EnrichmentService", "ProfileSearchService", "ResearchService"]
