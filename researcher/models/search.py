"""
Search API request/response schemas.

Request fields are optional at the schema level so that absent or blank
values are reported as 400 "<field> is required" by the router validators.

Dependencies: pydantic
System role: Search API contracts
"""

from pydantic import Field

from researcher.models.common import WireModel
from researcher.models.profile import ProfileResult, SearchResultRecord


class SearchQueryRequest(WireModel):
    """Request carrying a free-text person query."""

    search_query: str | None = Field(default=None, alias="searchQuery")


class SimilarProfilesRequest(WireModel):
    """Request for profiles similar to a chosen one."""

    profile_url: str | None = Field(default=None, alias="profileUrl")
    profile_name: str | None = Field(default=None, alias="profileName")


class WebsiteRequest(WireModel):
    """Request keyed by a website URL (crunchbase / video lookups)."""

    websiteurl: str | None = None


class ProfileSearchResponse(WireModel):
    """Profiles returned by a profile search."""

    results: list[ProfileResult]


class WebSearchResponse(WireModel):
    """Records returned by a general web search."""

    results: list[SearchResultRecord]
