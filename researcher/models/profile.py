"""
Profile domain models.

Candidate profile and web search result records shared by the search,
enrichment and research APIs.

Dependencies: pydantic
System role: Person/profile data contracts
"""

from typing import Literal

from pydantic import Field

from researcher.models.common import WireModel

ProfileSource = Literal["linkedin", "wikipedia"]


class ProfileResult(WireModel):
    """A candidate person profile found by a profile search."""

    id: str | None = Field(default=None, description="Search provider result ID")
    name: str = Field(description="Full name of the profile owner")
    headline: str = Field(default="", description="Short occupation/significance line")
    url: str = Field(description="Profile URL")
    text: str | None = Field(default=None, description="Page text of the profile")
    source: ProfileSource = Field(default="linkedin", description="Where the profile came from")


class SearchResultRecord(WireModel):
    """A general web search result used as dossier context."""

    id: str | None = None
    title: str | None = None
    url: str
    text: str | None = None
    summary: str | None = None
    published_date: str | None = Field(default=None, alias="publishedDate")
    author: str | None = None
