"""Enrichment service.

Produces the individual dossier sections from a context prompt (summary,
roast, praise, career) or from the selected profile (fun facts).

Dependencies: researcher.core.agents, researcher.application.services.profile_search_service
System role: Service layer for dossier sections
"""

import json
import logging

from researcher.application.services.profile_search_service import ProfileSearchService
from researcher.core.agents import DossierWriter
from researcher.core.exceptions import EnrichmentError
from researcher.core.prompt_utils import generate_profile_prompt
from researcher.models.enrichment import CareerResponse, FunFact, TimelineEvent
from researcher.models.profile import ProfileResult

logger = logging.getLogger(__name__)


class EnrichmentService:
    """Service for generating dossier sections with the LLM writer."""

    def __init__(self, writer: DossierWriter, search_service: ProfileSearchService) -> None:
        """
        Initialize service with dependencies.

        Args:
            writer: LLM writer
            search_service: Used to gather web results for fun facts
        """
        self._writer = writer
        self._search_service = search_service

    async def summary(self, context_prompt: str) -> str:
        return await self._writer.write_text("summary", context_prompt)

    async def roast(self, context_prompt: str) -> str:
        return await self._writer.write_text("roast", context_prompt)

    async def praise(self, context_prompt: str) -> str:
        return await self._writer.write_text("praise", context_prompt)

    async def career(self, context_prompt: str) -> CareerResponse:
        """
        Extract skills and a career timeline.

        Args:
            context_prompt: Shared context prompt

        Returns:
            CareerResponse: Skills and timeline

        Raises:
            EnrichmentError: The model returned no skills or no timeline
        """
        profile = await self._writer.write_career(context_prompt)

        if profile is None or not profile.skills or not profile.timeline:
            raise EnrichmentError("model returned no skills or no timeline", section="career")

        return CareerResponse(
            skills=profile.skills,
            timeline=[
                TimelineEvent(
                    title=event.title,
                    date_range=event.date_range,
                    description=event.description,
                )
                for event in profile.timeline
            ],
        )

    async def fun_facts(self, profile: ProfileResult) -> list[FunFact]:
        """
        Research lesser-known facts about the selected person.

        Process:
        1. Web search for the person's name and headline
        2. Ask the writer for facts grounded on profile + results

        Args:
            profile: Selected profile

        Returns:
            list[FunFact]: Facts with optional attribution

        Raises:
            EnrichmentError: The model returned no structured output
        """
        profile_prompt = generate_profile_prompt(profile)
        logger.info(
            f"{__name__}:fun_facts - START name={profile.name!r}, "
            f"profile_prompt_len={len(profile_prompt)}"
        )

        query = f"{profile.name} {profile.headline}".strip()
        results = await self._search_service.search_web(query)
        search_results = json.dumps(
            [
                {"title": r.title or "", "url": r.url, "text": r.text or ""}
                for r in results
                if r.url != profile.url
            ],
            indent=2,
            ensure_ascii=False,
        )

        fact_list = await self._writer.write_fun_facts(profile_prompt, search_results)
        if fact_list is None:
            raise EnrichmentError("model returned no fun facts", section="fun_facts")
        return [
            FunFact(fact=item.fact, source=item.source, source_url=item.source_url)
            for item in fact_list.fun_facts
        ]
