"""Research orchestration service.

Flow:
1. find_candidates: LinkedIn and Wikipedia searched in parallel
2. (caller picks a candidate)
3. build_dossier: one web search for context, then six independent
   enrichments fanned out in parallel

Both fan-outs settle all: a failing source or section is reported under
``errors`` and never blocks its siblings.

Dependencies: researcher.application.services, researcher.application.concurrency
System role: Multi-call orchestration for the research flow
"""

import logging

from researcher.application.concurrency import gather_settled, split_settled
from researcher.application.services.enrichment_service import EnrichmentService
from researcher.application.services.profile_search_service import ProfileSearchService
from researcher.core.prompt_utils import generate_context_prompt
from researcher.models.profile import ProfileResult
from researcher.models.research import CandidateProfilesResponse, DossierResponse

logger = logging.getLogger(__name__)


class ResearchService:
    """Coordinates candidate search and dossier assembly."""

    def __init__(
        self,
        search_service: ProfileSearchService,
        enrichment_service: EnrichmentService,
    ) -> None:
        self._search = search_service
        self._enrichment = enrichment_service

    async def find_candidates(self, search_query: str) -> CandidateProfilesResponse:
        """
        Search both profile sources in parallel.

        Args:
            search_query: Person query

        Returns:
            CandidateProfilesResponse: Per-source candidates; a failed source is null
        """
        settled = await gather_settled(
            linkedin=self._search.search_linkedin(search_query),
            wikipedia=self._search.search_wikipedia(search_query),
        )
        values, errors = split_settled(settled)
        for source, message in errors.items():
            logger.warning(f"{__name__}:find_candidates - {source} failed: {message}")

        return CandidateProfilesResponse(
            linkedin=values.get("linkedin"),
            wikipedia=values.get("wikipedia"),
            errors=errors,
        )

    async def build_dossier(self, search_query: str, profile: ProfileResult) -> DossierResponse:
        """
        Build the full dossier for a selected profile.

        Args:
            search_query: The original person query
            profile: Selected candidate

        Returns:
            DossierResponse: All sections that succeeded, plus per-section errors

        Raises:
            SearchProviderError: Context search failed (nothing to enrich from)
        """
        logger.info(f"{__name__}:build_dossier - START name={profile.name!r}")

        search_results = await self._search.search_web(search_query)
        context_prompt = generate_context_prompt(search_query, profile, search_results)

        settled = await gather_settled(
            summary=self._enrichment.summary(context_prompt),
            fun_facts=self._enrichment.fun_facts(profile),
            career=self._enrichment.career(context_prompt),
            roast=self._enrichment.roast(context_prompt),
            praise=self._enrichment.praise(context_prompt),
            similar=self._search.find_similar(profile.url, profile.name),
        )
        values, errors = split_settled(settled)
        for section, message in errors.items():
            logger.warning(f"{__name__}:build_dossier - {section} failed: {message}")

        logger.info(
            f"{__name__}:build_dossier - DONE sections_ok={len(values)}, "
            f"sections_failed={len(errors)}"
        )
        # Error keys use the section's JSON name
        fields = DossierResponse.model_fields
        return DossierResponse(
            profile=profile,
            context_prompt=context_prompt,
            errors={fields[name].alias or name: message for name, message in errors.items()},
            **values,
        )
