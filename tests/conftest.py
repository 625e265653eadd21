"""
Shared test fixtures and configuration for entire test suite.

Provides: sample profiles and search hits, mocked search client and writer
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from researcher.boundary.search import SearchHit
from researcher.configs.search import SearchSettings
from researcher.models.profile import ProfileResult, SearchResultRecord


def make_summary(name: str, headline: str) -> str:
    """Render a provider structured summary the way Exa returns it."""
    return json.dumps({"name": name, "headline": headline})


@pytest.fixture
def search_settings() -> SearchSettings:
    """Search settings with defaults, independent of the environment."""
    return SearchSettings(
        api_key="test-key",
        num_results=10,
        similar_num_results=15,
        similar_max_results=10,
        video_num_results=10,
    )


@pytest.fixture
def mock_search_client() -> MagicMock:
    """
    Create mock ExaSearchClient.

    Returns:
        MagicMock: Client whose search methods are AsyncMocks returning []
    """
    client = MagicMock()
    client.search = AsyncMock(return_value=[])
    client.search_and_contents = AsyncMock(return_value=[])
    client.find_similar_and_contents = AsyncMock(return_value=[])
    return client


@pytest.fixture
def mock_writer() -> MagicMock:
    """Create mock DossierWriter with async methods."""
    writer = MagicMock()
    writer.write_text = AsyncMock(return_value="Generated paragraph.")
    writer.write_career = AsyncMock()
    writer.write_fun_facts = AsyncMock()
    return writer


@pytest.fixture
def sample_profile() -> ProfileResult:
    """Provide a selected LinkedIn profile."""
    return ProfileResult(
        id="li-1",
        name="Ada Lovelace",
        headline="Mathematician, London",
        url="https://www.linkedin.com/in/ada-lovelace",
        text="Wrote the first published algorithm for the Analytical Engine.",
        source="linkedin",
    )


@pytest.fixture
def sample_search_results() -> list[SearchResultRecord]:
    """Provide web search records about the sample profile."""
    return [
        SearchResultRecord(
            id="r1",
            title="Ada Lovelace - Biography",
            url="https://example.com/ada",
            text="Ada Lovelace was an English mathematician.",
            summary="English mathematician and writer.",
        ),
        SearchResultRecord(
            id="r2",
            title=None,
            url="https://example.com/engine",
            text=None,
            summary=None,
        ),
    ]


@pytest.fixture
def linkedin_hits() -> list[SearchHit]:
    """Provider hits mixing profiles and non-profile LinkedIn pages."""
    return [
        SearchHit(
            id="1",
            url="https://www.linkedin.com/in/ada-lovelace",
            text="Ada profile text",
            summary=make_summary("Ada Lovelace", "Mathematician, London"),
        ),
        SearchHit(
            id="2",
            url="https://www.linkedin.com/company/analytical-engines",
            text="Company page",
            summary=make_summary("Analytical Engines", "Company"),
        ),
        SearchHit(
            id="3",
            url="https://www.linkedin.com/in/broken-summary",
            text="Another profile",
            summary="not json",
        ),
    ]
