"""
Research orchestration API schemas.

Each section of a dossier is independent: a failed section is null and its
error string is reported under ``errors`` keyed by section name.

Dependencies: pydantic
System role: Candidate search and dossier API contracts
"""

from pydantic import Field

from researcher.models.common import WireModel
from researcher.models.enrichment import CareerResponse, FunFact
from researcher.models.profile import ProfileResult


class DossierRequest(WireModel):
    """Request to build a dossier for the chosen profile."""

    search_query: str | None = Field(default=None, alias="searchQuery")
    selected_profile: ProfileResult | None = Field(default=None, alias="selectedProfile")


class CandidateProfilesResponse(WireModel):
    """LinkedIn and Wikipedia candidates searched in parallel."""

    linkedin: list[ProfileResult] | None = None
    wikipedia: list[ProfileResult] | None = None
    errors: dict[str, str] = Field(default_factory=dict)


class DossierResponse(WireModel):
    """One-page dossier assembled from the enrichment fan-out."""

    profile: ProfileResult
    context_prompt: str = Field(alias="contextPrompt")
    summary: str | None = None
    fun_facts: list[FunFact] | None = Field(default=None, alias="funFacts")
    career: CareerResponse | None = None
    roast: str | None = None
    praise: str | None = None
    similar: list[ProfileResult] | None = None
    errors: dict[str, str] = Field(default_factory=dict)
