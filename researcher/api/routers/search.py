"""Search API endpoints.

Routes:
- POST /search/linkedin - LinkedIn profile candidates
- POST /search/wikipedia - Wikipedia article candidates
- POST /search/web - General web results for a query
- POST /search/similar - People similar to a profile
- POST /search/crunchbase - Crunchbase page for a website
- POST /search/youtube - YouTube videos mentioning a website

Dependencies: researcher.application.services.profile_search_service
System role: Search HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from researcher.api.deps import get_profile_search_service
from researcher.api.routers.router_utils import handle_research_errors, require_field
from researcher.api.routers.router_utils.error_handling import ERROR_RESPONSES
from researcher.application.services import ProfileSearchService
from researcher.models.search import (
    ProfileSearchResponse,
    SearchQueryRequest,
    SimilarProfilesRequest,
    WebSearchResponse,
    WebsiteRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"], responses=ERROR_RESPONSES)


@router.post("/linkedin", response_model=ProfileSearchResponse)
@handle_research_errors("Failed to perform LinkedIn search")
async def search_linkedin(
    request: SearchQueryRequest,
    search_service: ProfileSearchService = Depends(get_profile_search_service),
) -> ProfileSearchResponse:
    """Search LinkedIn profiles for a person query."""
    search_query = require_field(request.search_query, "searchQuery")
    logger.info(f"{__name__}:search_linkedin - query={search_query!r}")
    results = await search_service.search_linkedin(search_query)
    return ProfileSearchResponse(results=results)


@router.post("/wikipedia", response_model=ProfileSearchResponse)
@handle_research_errors("Failed to perform Wikipedia search")
async def search_wikipedia(
    request: SearchQueryRequest,
    search_service: ProfileSearchService = Depends(get_profile_search_service),
) -> ProfileSearchResponse:
    """Search Wikipedia articles for a person query."""
    search_query = require_field(request.search_query, "searchQuery")
    results = await search_service.search_wikipedia(search_query)
    return ProfileSearchResponse(results=results)


@router.post("/web", response_model=WebSearchResponse)
@handle_research_errors("Failed to perform web search")
async def search_web(
    request: SearchQueryRequest,
    search_service: ProfileSearchService = Depends(get_profile_search_service),
) -> WebSearchResponse:
    """General web search used to build dossier context."""
    search_query = require_field(request.search_query, "searchQuery")
    results = await search_service.search_web(search_query)
    return WebSearchResponse(results=results)


@router.post("/similar", response_model=ProfileSearchResponse)
@handle_research_errors("Failed to find similar profiles")
async def find_similar(
    request: SimilarProfilesRequest,
    search_service: ProfileSearchService = Depends(get_profile_search_service),
) -> ProfileSearchResponse:
    """Find people similar to the given profile."""
    profile_url = require_field(request.profile_url, "profileUrl")
    results = await search_service.find_similar(profile_url, request.profile_name)
    return ProfileSearchResponse(results=results)


@router.post("/crunchbase", response_model=WebSearchResponse)
@handle_research_errors("Failed to perform search")
async def search_crunchbase(
    request: WebsiteRequest,
    search_service: ProfileSearchService = Depends(get_profile_search_service),
) -> WebSearchResponse:
    """Find the crunchbase page for a website."""
    websiteurl = require_field(request.websiteurl, "websiteurl")
    results = await search_service.search_crunchbase(websiteurl)
    return WebSearchResponse(results=results)


@router.post("/youtube", response_model=WebSearchResponse)
@handle_research_errors("Failed to perform search")
async def search_youtube(
    request: WebsiteRequest,
    search_service: ProfileSearchService = Depends(get_profile_search_service),
) -> WebSearchResponse:
    """Find YouTube videos mentioning a website."""
    websiteurl = require_field(request.websiteurl, "websiteurl")
    results = await search_service.search_youtube(websiteurl)
    return WebSearchResponse(results=results)
