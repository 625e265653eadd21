"""
Search boundary schemas.

Provider-neutral view of a search hit plus the JSON schemas sent to the
provider to request per-result structured summaries.

Dependencies: pydantic
System role: Search provider data contracts
"""

from typing import Any

from pydantic import BaseModel

PROFILE_SUMMARY_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Profile Summary",
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Full name of the profile owner",
        },
        "headline": {
            "type": "string",
            "description": "Current profession and location of the profile owner in as few words as possible",
        },
    },
    "required": ["name", "headline"],
}

WIKIPEDIA_SUMMARY_QUERY = (
    "Return the name of the person from this Wikipedia article and a very brief "
    "one-sentence headline about them. The headline should include their occupation, "
    "notable work, and/or significance."
)

SIMILAR_SUMMARY_QUERY = (
    "Return the name and the headline of the profile owner. The headline should be "
    "the job title, company, and location as concisely as possible"
)


class SearchHit(BaseModel):
    """Single result returned by the search provider."""

    id: str | None = None
    url: str = ""
    title: str | None = None
    text: str | None = None
    summary: str | None = None
    published_date: str | None = None
    author: str | None = None

    @classmethod
    def from_result(cls, result: Any) -> "SearchHit":
        """Build from an SDK result object, tolerating absent attributes."""
        return cls(
            id=getattr(result, "id", None),
            url=getattr(result, "url", None) or "",
            title=getattr(result, "title", None),
            text=getattr(result, "text", None),
            summary=getattr(result, "summary", None),
            published_date=getattr(result, "published_date", None),
            author=getattr(result, "author", None),
        )
