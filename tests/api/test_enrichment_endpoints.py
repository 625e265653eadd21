"""
Test suite for enrichment API endpoints.

Tests POST /enrich/* with FastAPI TestClient and a mocked EnrichmentService.

System role: Verification of dossier section HTTP API
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from researcher.api.deps import get_enrichment_service
from researcher.api.main import create_app
from researcher.application.services import EnrichmentService
from researcher.core.agents import DossierWriter
from researcher.core.exceptions import EnrichmentError
from researcher.models.enrichment import CareerResponse, FunFact, TimelineEvent
from researcher.models.profile import ProfileResult


@pytest.fixture
def mock_enrichment_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(mock_enrichment_service: AsyncMock) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_enrichment_service] = lambda: mock_enrichment_service
    return TestClient(app)


class TestTextSections:
    @pytest.mark.parametrize("section", ["summary", "roast", "praise"])
    def test_missing_context_prompt_returns_400(self, client: TestClient, section: str) -> None:
        response = client.post(f"/api/v1/enrich/{section}", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "contextPrompt is required"}

    @pytest.mark.parametrize("section", ["summary", "roast", "praise"])
    def test_returns_section_text(
        self, client: TestClient, mock_enrichment_service: AsyncMock, section: str
    ) -> None:
        getattr(mock_enrichment_service, section).return_value = f"A {section} paragraph."

        response = client.post(
            f"/api/v1/enrich/{section}", json={"contextPrompt": "## Search Query\nAda"}
        )

        assert response.status_code == 200
        assert response.json() == {section: f"A {section} paragraph."}

    def test_llm_failure_returns_500(
        self, client: TestClient, mock_enrichment_service: AsyncMock
    ) -> None:
        mock_enrichment_service.roast.side_effect = TimeoutError("upstream timed out")

        response = client.post("/api/v1/enrich/roast", json={"contextPrompt": "ctx"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to process roast request: upstream timed out"
        }


class TestCareer:
    def test_returns_skills_and_timeline(
        self, client: TestClient, mock_enrichment_service: AsyncMock
    ) -> None:
        mock_enrichment_service.career.return_value = CareerResponse(
            skills=["Mathematics", "Algorithms"],
            timeline=[
                TimelineEvent(
                    title="Collaborator",
                    date_range="1842-1843",
                    description="Translated and annotated Menabrea's paper.",
                )
            ],
        )

        response = client.post("/api/v1/enrich/career", json={"contextPrompt": "ctx"})

        assert response.status_code == 200
        data = response.json()
        assert data["skills"] == ["Mathematics", "Algorithms"]
        assert data["timeline"][0] == {
            "title": "Collaborator",
            "dateRange": "1842-1843",
            "description": "Translated and annotated Menabrea's paper.",
        }

    def test_empty_career_returns_500(
        self, client: TestClient, mock_enrichment_service: AsyncMock
    ) -> None:
        mock_enrichment_service.career.side_effect = EnrichmentError(
            "model returned no skills or no timeline", section="career"
        )

        response = client.post("/api/v1/enrich/career", json={"contextPrompt": "ctx"})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Failed to generate career information")

    def test_no_tool_call_returns_500(self) -> None:
        structured_runnable = MagicMock()
        structured_runnable.ainvoke = AsyncMock(return_value=None)
        structured_chat_model = MagicMock()
        structured_chat_model.with_structured_output.return_value = structured_runnable
        service = EnrichmentService(
            writer=DossierWriter(chat_model=MagicMock(), structured_chat_model=structured_chat_model),
            search_service=MagicMock(),
        )
        app = create_app()
        app.dependency_overrides[get_enrichment_service] = lambda: service

        response = TestClient(app).post("/api/v1/enrich/career", json={"contextPrompt": "x"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to generate career information: model returned no skills or no timeline"
        }


class TestFunFacts:
    def test_missing_selected_profile_returns_400(self, client: TestClient) -> None:
        response = client.post("/api/v1/enrich/fun-facts", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "selectedProfile is required"}

    def test_incomplete_selected_profile_returns_400(self, client: TestClient) -> None:
        response = client.post("/api/v1/enrich/fun-facts", json={"selectedProfile": {"name": "Ada"}})

        assert response.status_code == 400
        assert "url" in response.json()["error"]

    def test_returns_fun_facts(
        self,
        client: TestClient,
        mock_enrichment_service: AsyncMock,
        sample_profile: ProfileResult,
    ) -> None:
        mock_enrichment_service.fun_facts.return_value = [
            FunFact(fact="She called her approach poetical science.", source="Wikipedia",
                    source_url="https://en.wikipedia.org/wiki/Ada_Lovelace"),
            FunFact(fact="Her father was Lord Byron."),
        ]

        response = client.post(
            "/api/v1/enrich/fun-facts",
            json={"selectedProfile": sample_profile.model_dump(by_alias=True)},
        )

        assert response.status_code == 200
        facts = response.json()["funFacts"]
        assert len(facts) == 2
        assert facts[0]["sourceUrl"] == "https://en.wikipedia.org/wiki/Ada_Lovelace"
        assert facts[1]["source"] is None
        called_profile = mock_enrichment_service.fun_facts.await_args.args[0]
        assert called_profile.name == "Ada Lovelace"
