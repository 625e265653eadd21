"""
Enrichment API request/response schemas.

Dependencies: pydantic
System role: Dossier section API contracts
"""

from pydantic import Field

from researcher.models.common import WireModel
from researcher.models.profile import ProfileResult


class ContextPromptRequest(WireModel):
    """Request carrying a prebuilt context prompt."""

    context_prompt: str | None = Field(default=None, alias="contextPrompt")


class SelectedProfileRequest(WireModel):
    """Request carrying the profile the user picked."""

    selected_profile: ProfileResult | None = Field(default=None, alias="selectedProfile")


class SummaryResponse(WireModel):
    summary: str


class RoastResponse(WireModel):
    roast: str


class PraiseResponse(WireModel):
    praise: str


class TimelineEvent(WireModel):
    """Single career timeline entry."""

    title: str
    date_range: str = Field(alias="dateRange")
    description: str


class CareerResponse(WireModel):
    """Skills and reverse-chronological career timeline."""

    skills: list[str]
    timeline: list[TimelineEvent]


class FunFact(WireModel):
    """Single fun fact with optional attribution."""

    fact: str
    source: str | None = None
    source_url: str | None = Field(default=None, alias="sourceUrl")


class FunFactsResponse(WireModel):
    fun_facts: list[FunFact] = Field(alias="funFacts")
