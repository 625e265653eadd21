"""Enrichment API endpoints.

Routes:
- POST /enrich/summary - Short profile summary
- POST /enrich/roast - Playful roast paragraph
- POST /enrich/praise - Praise paragraph
- POST /enrich/career - Skills and career timeline (structured)
- POST /enrich/fun-facts - Fun facts about the selected profile (structured)

Dependencies: researcher.application.services.enrichment_service
System role: Dossier section HTTP API
"""

from fastapi import APIRouter, Depends

from researcher.api.deps import get_enrichment_service
from researcher.api.routers.router_utils import handle_research_errors, require_field
from researcher.api.routers.router_utils.error_handling import ERROR_RESPONSES
from researcher.application.services import EnrichmentService
from researcher.models.enrichment import (
    CareerResponse,
    ContextPromptRequest,
    FunFactsResponse,
    PraiseResponse,
    RoastResponse,
    SelectedProfileRequest,
    SummaryResponse,
)

router = APIRouter(prefix="/enrich", tags=["enrichment"], responses=ERROR_RESPONSES)


@router.post("/summary", response_model=SummaryResponse)
@handle_research_errors("Failed to process summary request")
async def summary(
    request: ContextPromptRequest,
    enrichment_service: EnrichmentService = Depends(get_enrichment_service),
) -> SummaryResponse:
    context_prompt = require_field(request.context_prompt, "contextPrompt")
    return SummaryResponse(summary=await enrichment_service.summary(context_prompt))


@router.post("/roast", response_model=RoastResponse)
@handle_research_errors("Failed to process roast request")
async def roast(
    request: ContextPromptRequest,
    enrichment_service: EnrichmentService = Depends(get_enrichment_service),
) -> RoastResponse:
    context_prompt = require_field(request.context_prompt, "contextPrompt")
    return RoastResponse(roast=await enrichment_service.roast(context_prompt))


@router.post("/praise", response_model=PraiseResponse)
@handle_research_errors("Failed to process praise request")
async def praise(
    request: ContextPromptRequest,
    enrichment_service: EnrichmentService = Depends(get_enrichment_service),
) -> PraiseResponse:
    context_prompt = require_field(request.context_prompt, "contextPrompt")
    return PraiseResponse(praise=await enrichment_service.praise(context_prompt))


@router.post("/career", response_model=CareerResponse)
@handle_research_errors("Failed to generate career information")
async def career(
    request: ContextPromptRequest,
    enrichment_service: EnrichmentService = Depends(get_enrichment_service),
) -> CareerResponse:
    """Extract skills and a reverse-chronological career timeline.

    Raises:
        HTTPException(400): contextPrompt missing
        HTTPException(500): LLM failure or empty skills/timeline
    """
    context_prompt = require_field(request.context_prompt, "contextPrompt")
    return await enrichment_service.career(context_prompt)


@router.post("/fun-facts", response_model=FunFactsResponse)
@handle_research_errors("Failed to generate fun facts")
async def fun_facts(
    request: SelectedProfileRequest,
    enrichment_service: EnrichmentService = Depends(get_enrichment_service),
) -> FunFactsResponse:
    """Research lesser-known facts about the selected profile."""
    profile = require_field(request.selected_profile, "selectedProfile")
    facts = await enrichment_service.fun_facts(profile)
    return FunFactsResponse(fun_facts=facts)
