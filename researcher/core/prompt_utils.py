"""
Context prompt builders.

Render a chosen profile and its web search results into the markdown block
that every enrichment prompt is grounded on.

Dependencies: json (stdlib), researcher.models
System role: Prompt context assembly
"""

import json
from collections.abc import Sequence

from researcher.models.profile import ProfileResult, SearchResultRecord


def generate_profile_prompt(profile: ProfileResult) -> str:
    """
    Render a single profile as a markdown block.

    Args:
        profile: Selected profile

    Returns:
        str: Profile block with name, headline, source, URL and page text
    """
    return "\n".join([
        f"Name: {profile.name}",
        f"Headline: {profile.headline}",
        f"Source: {profile.source}",
        f"URL: {profile.url}",
        "Text: ",
        profile.text or "",
    ])


def generate_context_prompt(
    search_query: str,
    profile: ProfileResult,
    search_results: Sequence[SearchResultRecord],
) -> str:
    """
    Build the shared context prompt for dossier enrichments.

    Args:
        search_query: The user's original person query
        profile: Selected profile
        search_results: Web search results about the person

    Returns:
        str: Markdown context with query, profile and JSON search results
    """
    results_content = [
        {
            "title": result.title or "",
            "url": result.url,
            "text": result.text or "",
            "summary": result.summary or "",
        }
        for result in search_results
    ]

    return "\n".join([
        "## Search Query",
        search_query,
        "",
        "## Profile Information",
        f"Name: {profile.name}",
        f"Headline: {profile.headline}",
        f"Source: {profile.source}",
        "Text: ",
        profile.text or "",
        "",
        "## Search Results",
        json.dumps(results_content, indent=2, ensure_ascii=False),
    ])
