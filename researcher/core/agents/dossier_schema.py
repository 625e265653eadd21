"""
Dossier writer output schemas.

Structured output schemas the LLM is constrained to for the career and
fun-fact sections.

Dependencies: pydantic
System role: Agent response schema definitions
"""

from pydantic import BaseModel, Field


class CareerEvent(BaseModel):
    """One position or milestone in a career timeline."""

    title: str = Field(description="The title or position/role of the career event")
    date_range: str = Field(
        description='The date range of the event (e.g., "2018-2020", "May 2019 - Present")'
    )
    description: str = Field(
        description="A brief description of the role, accomplishments, or significance"
    )


class CareerProfile(BaseModel):
    """Skills and timeline extracted from the context."""

    skills: list[str] = Field(
        default_factory=list,
        description="List of professional skills demonstrated by the person",
    )
    timeline: list[CareerEvent] = Field(
        default_factory=list,
        description="A chronological timeline of important career events",
    )


class FunFactItem(BaseModel):
    """A single lesser-known fact about the person."""

    fact: str = Field(description="The interesting fun fact about the person")
    source: str | None = Field(
        default=None,
        description='Title of the source website, e.g. "LinkedIn", "Forbes", "TechCrunch"',
    )
    source_url: str | None = Field(
        default=None,
        description="The URL link to the source, if available",
    )


class FunFactList(BaseModel):
    """Collection of fun facts."""

    fun_facts: list[FunFactItem] = Field(
        default_factory=list,
        description="A collection of interesting and engaging fun facts about the person",
    )
