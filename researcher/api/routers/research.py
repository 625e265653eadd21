"""Research orchestration API endpoints.

Routes:
- POST /research/candidates - LinkedIn + Wikipedia candidates in one call
- POST /research/dossier - Context search plus all dossier sections

Dependencies: researcher.application.services.research_service
System role: Research flow HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from researcher.api.deps import get_research_service
from researcher.api.routers.router_utils import handle_research_errors, require_field
from researcher.api.routers.router_utils.error_handling import ERROR_RESPONSES
from researcher.application.services import ResearchService
from researcher.models.research import (
    CandidateProfilesResponse,
    DossierRequest,
    DossierResponse,
)
from researcher.models.search import SearchQueryRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/research", tags=["research"], responses=ERROR_RESPONSES)


@router.post("/candidates", response_model=CandidateProfilesResponse)
@handle_research_errors("Failed to search for candidates")
async def find_candidates(
    request: SearchQueryRequest,
    research_service: ResearchService = Depends(get_research_service),
) -> CandidateProfilesResponse:
    """Search LinkedIn and Wikipedia in parallel.

    A source that fails is returned as null with its error under ``errors``.
    """
    search_query = require_field(request.search_query, "searchQuery")
    return await research_service.find_candidates(search_query)


@router.post("/dossier", response_model=DossierResponse)
@handle_research_errors("Failed to build dossier")
async def build_dossier(
    request: DossierRequest,
    research_service: ResearchService = Depends(get_research_service),
) -> DossierResponse:
    """Build the dossier for the selected profile.

    Flow:
    1. Web search for the original query
    2. Build the shared context prompt
    3. Fan out summary, fun facts, career, roast, praise and similar people

    Raises:
        HTTPException(400): searchQuery or selectedProfile missing
        HTTPException(500): Context search failed
    """
    search_query = require_field(request.search_query, "searchQuery")
    profile = require_field(request.selected_profile, "selectedProfile")
    logger.info(f"{__name__}:build_dossier - query={search_query!r}, profile={profile.url}")
    return await research_service.build_dossier(search_query, profile)
