"""Profile search service.

Finds candidate LinkedIn/Wikipedia profiles, similar people, and general web
context through the search boundary, and reshapes provider hits into API
records.

Dependencies: researcher.boundary.search, researcher.configs
System role: Search orchestration layer
"""

import json
import logging

from researcher.boundary.search import ExaSearchClient, SearchHit
from researcher.boundary.search.search_schemas import (
    PROFILE_SUMMARY_SCHEMA,
    SIMILAR_SUMMARY_QUERY,
    WIKIPEDIA_SUMMARY_QUERY,
)
from researcher.configs.search import SearchSettings
from researcher.models.profile import ProfileResult, ProfileSource, SearchResultRecord

logger = logging.getLogger(__name__)

LINKEDIN_PROFILE_MARKER = "linkedin.com/in/"
WIKIPEDIA_ARTICLE_MARKER = "wikipedia.org/wiki/"


def parse_profile_summary(summary: str | None) -> tuple[str, str]:
    """
    Parse a structured `{name, headline}` summary returned by the provider.

    Args:
        summary: JSON string produced by the provider's summary schema

    Returns:
        tuple: (name, headline); empty strings when absent or malformed
    """
    if not summary:
        return "", ""
    try:
        data = json.loads(summary)
    except (TypeError, ValueError) as e:
        logger.warning(f"{__name__}:parse_profile_summary - unparseable summary: {e}")
        return "", ""
    if not isinstance(data, dict):
        return "", ""
    return str(data.get("name") or ""), str(data.get("headline") or "")


def source_for_url(url: str) -> ProfileSource:
    """Classify a profile URL as wikipedia or linkedin."""
    return "wikipedia" if "wikipedia.org" in url else "linkedin"


def hit_to_profile(hit: SearchHit, source: ProfileSource) -> ProfileResult:
    """Map a provider hit carrying a profile summary to a ProfileResult."""
    name, headline = parse_profile_summary(hit.summary)
    return ProfileResult(
        id=hit.id,
        name=name,
        headline=headline,
        url=hit.url,
        text=hit.text,
        source=source,
    )


def hit_to_record(hit: SearchHit) -> SearchResultRecord:
    """Map a provider hit to a web search record."""
    return SearchResultRecord(
        id=hit.id,
        title=hit.title,
        url=hit.url,
        text=hit.text,
        summary=hit.summary,
        published_date=hit.published_date,
        author=hit.author,
    )


class ProfileSearchService:
    """Profile and context search on top of ExaSearchClient."""

    def __init__(self, search_client: ExaSearchClient, settings: SearchSettings) -> None:
        """
        Initialize service.

        Args:
            search_client: Search boundary client
            settings: Search result limits
        """
        self._client = search_client
        self._settings = settings

    async def search_linkedin(self, search_query: str) -> list[ProfileResult]:
        """
        Search LinkedIn profiles matching a person query.

        Non-profile LinkedIn pages (companies, posts) are dropped.

        Args:
            search_query: Person query

        Returns:
            list[ProfileResult]: LinkedIn candidates
        """
        hits = await self._client.search_and_contents(
            search_query,
            text=True,
            type="keyword",
            category="linkedin profile",
            summary={"schema": PROFILE_SUMMARY_SCHEMA},
        )
        profiles = [
            hit_to_profile(hit, "linkedin")
            for hit in hits
            if LINKEDIN_PROFILE_MARKER in hit.url
        ]
        logger.info(
            f"{__name__}:search_linkedin - filtered {len(hits)} hits to {len(profiles)} profiles"
        )
        return profiles

    async def search_wikipedia(self, search_query: str) -> list[ProfileResult]:
        """
        Search English Wikipedia articles about a person.

        Articles whose summary lacks a name or headline are dropped.

        Args:
            search_query: Person query

        Returns:
            list[ProfileResult]: Wikipedia candidates
        """
        hits = await self._client.search_and_contents(
            search_query,
            text=True,
            type="keyword",
            num_results=self._settings.num_results,
            include_domains=["en.wikipedia.org"],
            summary={"query": WIKIPEDIA_SUMMARY_QUERY, "schema": PROFILE_SUMMARY_SCHEMA},
        )
        profiles = [
            profile
            for profile in (
                hit_to_profile(hit, "wikipedia")
                for hit in hits
                if WIKIPEDIA_ARTICLE_MARKER in hit.url
            )
            if profile.name and profile.headline
        ]
        logger.info(
            f"{__name__}:search_wikipedia - filtered {len(hits)} hits to {len(profiles)} articles"
        )
        return profiles

    async def search_web(self, search_query: str) -> list[SearchResultRecord]:
        """
        General web search with page text, used as dossier context.

        Args:
            search_query: Person query

        Returns:
            list[SearchResultRecord]: Web results
        """
        hits = await self._client.search_and_contents(
            search_query,
            text=True,
            type="keyword",
            num_results=self._settings.num_results,
        )
        return [hit_to_record(hit) for hit in hits]

    async def find_similar(
        self,
        profile_url: str,
        profile_name: str | None = None,
    ) -> list[ProfileResult]:
        """
        Find people similar to a profile.

        Entries with no name, or with the same name as the reference profile
        (case-insensitive, trimmed), are dropped.

        Args:
            profile_url: Reference profile URL
            profile_name: Reference profile name

        Returns:
            list[ProfileResult]: Similar profiles, at most similar_max_results
        """
        hits = await self._client.find_similar_and_contents(
            profile_url,
            text=True,
            num_results=self._settings.similar_num_results,
            include_domains=["linkedin.com", "wikipedia.org"],
            summary={"query": SIMILAR_SUMMARY_QUERY, "schema": PROFILE_SUMMARY_SCHEMA},
        )
        own_name = (profile_name or "").strip().lower()

        similar = []
        for hit in hits:
            profile = hit_to_profile(hit, source_for_url(hit.url))
            if not profile.name:
                continue
            if own_name and profile.name.strip().lower() == own_name:
                continue
            similar.append(profile)

        similar = similar[: self._settings.similar_max_results]
        logger.info(f"{__name__}:find_similar - found {len(similar)} similar profiles")
        return similar

    async def search_crunchbase(self, websiteurl: str) -> list[SearchResultRecord]:
        """
        Find the crunchbase page for a company website.

        Args:
            websiteurl: Company website URL or domain

        Returns:
            list[SearchResultRecord]: At most one result
        """
        hits = await self._client.search(
            f"{websiteurl} crunchbase page:",
            type="keyword",
            num_results=1,
            include_domains=["crunchbase.com"],
            include_text=[websiteurl],
        )
        return [hit_to_record(hit) for hit in hits]

    async def search_youtube(self, websiteurl: str) -> list[SearchResultRecord]:
        """
        Find YouTube videos mentioning a website.

        Args:
            websiteurl: Website URL or domain

        Returns:
            list[SearchResultRecord]: Video results
        """
        hits = await self._client.search(
            websiteurl,
            type="keyword",
            num_results=self._settings.video_num_results,
            include_domains=["youtube.com"],
            include_text=[websiteurl],
        )
        return [hit_to_record(hit) for hit in hits]
