"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: researcher.configs, researcher.application, researcher.boundary
System role: DI container for service injection
"""

from fastapi import Depends

from researcher.application.services import (
    EnrichmentService,
    ProfileSearchService,
    ResearchService,
)
from researcher.boundary.search import ExaSearchClient
from researcher.configs import get_settings
from researcher.core.agents import DossierWriter


class ServiceCache:
    """Container for cached client instances."""

    def __init__(self):
        self._search_client = None
        self._dossier_writer = None

    @property
    def search_client(self) -> ExaSearchClient:
        """Get cached search client."""
        if self._search_client is None:
            settings = get_settings()
            self._search_client = ExaSearchClient(api_key=settings.search.api_key)
        return self._search_client

    @property
    def dossier_writer(self) -> DossierWriter:
        """Get cached LLM writer."""
        if self._dossier_writer is None:
            llm = get_settings().llm
            self._dossier_writer = DossierWriter(
                model_id=llm.model,
                structured_model_id=llm.structured_model,
                api_key=llm.api_key,
                temperature=llm.temperature,
                timeout=llm.timeout_seconds,
            )
        return self._dossier_writer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._search_client = None
        self._dossier_writer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_profile_search_service() -> ProfileSearchService:
    """
    Get profile search service instance.

    Returns:
        ProfileSearchService: Service bound to the cached search client
    """
    return ProfileSearchService(
        search_client=get_service_cache().search_client,
        settings=get_settings().search,
    )


def get_enrichment_service(
    search_service: ProfileSearchService = Depends(get_profile_search_service),
) -> EnrichmentService:
    """
    Get enrichment service instance.

    Args:
        search_service: Profile search service (injected via Depends)

    Returns:
        EnrichmentService: Service bound to the cached LLM writer
    """
    return EnrichmentService(
        writer=get_service_cache().dossier_writer,
        search_service=search_service,
    )


def get_research_service(
    search_service: ProfileSearchService = Depends(get_profile_search_service),
    enrichment_service: EnrichmentService = Depends(get_enrichment_service),
) -> ResearchService:
    """
    Get research orchestration service instance.

    Args:
        search_service: Profile search service (injected via Depends)
        enrichment_service: Enrichment service (injected via Depends)

    Returns:
        ResearchService: Orchestration service
    """
    return ResearchService(
        search_service=search_service,
        enrichment_service=enrichment_service,
    )
