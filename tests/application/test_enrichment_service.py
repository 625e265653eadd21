"""
Test suite for EnrichmentService.

Uses a mocked DossierWriter and a ProfileSearchService over a mocked client.

System role: Verification of dossier section service layer
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from researcher.application.services.enrichment_service import EnrichmentService
from researcher.core.agents.dossier_schema import (
    CareerEvent,
    CareerProfile,
    FunFactItem,
    FunFactList,
)
from researcher.core.exceptions import EnrichmentError
from researcher.models.profile import ProfileResult, SearchResultRecord


@pytest.fixture
def mock_search_service() -> MagicMock:
    service = MagicMock()
    service.search_web = AsyncMock(return_value=[])
    return service


@pytest.fixture
def enrichment_service(mock_writer: MagicMock, mock_search_service: MagicMock) -> EnrichmentService:
    return EnrichmentService(writer=mock_writer, search_service=mock_search_service)


class TestTextSections:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("section", ["summary", "roast", "praise"])
    async def test_delegates_to_writer(
        self, enrichment_service: EnrichmentService, mock_writer: MagicMock, section: str
    ) -> None:
        result = await getattr(enrichment_service, section)("ctx")

        assert result == "Generated paragraph."
        mock_writer.write_text.assert_awaited_once_with(section, "ctx")


class TestCareer:
    @pytest.mark.asyncio
    async def test_maps_career_profile(
        self, enrichment_service: EnrichmentService, mock_writer: MagicMock
    ) -> None:
        mock_writer.write_career.return_value = CareerProfile(
            skills=["Mathematics"],
            timeline=[
                CareerEvent(title="Analyst", date_range="1842-1843", description="Wrote Note G."),
            ],
        )

        career = await enrichment_service.career("ctx")

        assert career.skills == ["Mathematics"]
        assert career.timeline[0].date_range == "1842-1843"
        assert career.model_dump(by_alias=True)["timeline"][0]["dateRange"] == "1842-1843"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "profile",
        [
            CareerProfile(skills=[], timeline=[CareerEvent(title="t", date_range="d", description="x")]),
            CareerProfile(skills=["Math"], timeline=[]),
            CareerProfile(),
        ],
    )
    async def test_empty_output_raises(
        self, enrichment_service: EnrichmentService, mock_writer: MagicMock, profile: CareerProfile
    ) -> None:
        mock_writer.write_career.return_value = profile

        with pytest.raises(EnrichmentError) as exc_info:
            await enrichment_service.career("ctx")

        assert exc_info.value.section == "career"

    @pytest.mark.asyncio
    async def test_no_structured_output_raises(
        self, enrichment_service: EnrichmentService, mock_writer: MagicMock
    ) -> None:
        mock_writer.write_career.return_value = None

        with pytest.raises(EnrichmentError, match="no skills or no timeline"):
            await enrichment_service.career("ctx")


class TestFunFacts:
    @pytest.mark.asyncio
    async def test_searches_then_writes_facts(
        self,
        enrichment_service: EnrichmentService,
        mock_writer: MagicMock,
        mock_search_service: MagicMock,
        sample_profile: ProfileResult,
    ) -> None:
        mock_search_service.search_web.return_value = [
            SearchResultRecord(url=sample_profile.url, title="Own profile", text="skip me"),
            SearchResultRecord(url="https://example.com/ada", title="Bio", text="Poetical science"),
        ]
        mock_writer.write_fun_facts.return_value = FunFactList(
            fun_facts=[
                FunFactItem(fact="She called it poetical science.", source="Bio",
                            source_url="https://example.com/ada"),
            ]
        )

        facts = await enrichment_service.fun_facts(sample_profile)

        mock_search_service.search_web.assert_awaited_once_with("Ada Lovelace Mathematician, London")
        profile_prompt, search_results = mock_writer.write_fun_facts.await_args.args
        assert "Name: Ada Lovelace" in profile_prompt
        rendered = json.loads(search_results)
        assert [r["url"] for r in rendered] == ["https://example.com/ada"]
        assert facts[0].fact == "She called it poetical science."
        assert facts[0].source_url == "https://example.com/ada"

    @pytest.mark.asyncio
    async def test_search_failure_propagates(
        self,
        enrichment_service: EnrichmentService,
        mock_writer: MagicMock,
        mock_search_service: MagicMock,
        sample_profile: ProfileResult,
    ) -> None:
        mock_search_service.search_web.side_effect = RuntimeError("search down")

        with pytest.raises(RuntimeError, match="search down"):
            await enrichment_service.fun_facts(sample_profile)

        mock_writer.write_fun_facts.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_structured_output_raises(
        self,
        enrichment_service: EnrichmentService,
        mock_writer: MagicMock,
        sample_profile: ProfileResult,
    ) -> None:
        mock_writer.write_fun_facts.return_value = None

        with pytest.raises(EnrichmentError) as exc_info:
            await enrichment_service.fun_facts(sample_profile)

        assert exc_info.value.section == "fun_facts"
        assert str(exc_info.value) == "model returned no fun facts"
