"""
HTTP tests for the presentation and image endpoints.
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest

from pitchcraft.controllers import presentation_controller
from pitchcraft.core import ai_generators
from pitchcraft.core.ai_generators import PLACEHOLDER_NOTE
from pitchcraft.core.deck_builder import placeholder_image_url

from conftest import E2E_TEXT, RICH_TEXT

API = "/api/v1"


class TestHealth:

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to the PitchCraft API"}

    @pytest.mark.asyncio
    async def test_db_check(self, client):
        response = await client.get("/db_check")
        assert response.json()["status"] == "healthy"


class TestExtract:

    @pytest.mark.asyncio
    async def test_extract_e2e(self, client):
        response = await client.post(f"{API}/presentations/extract", json={"text": E2E_TEXT})

        assert response.status_code == 200
        data = response.json()
        assert data["profile"]["company_name"] == "Acme Robotics"
        assert data["profile"]["personnel"] == [{"name": "Jane Doe", "role": "CEO"}]
        assert data["profile"]["sections"]["problem"]
        metrics = {(m["type"], m["value"]) for m in data["metrics"]}
        assert ("users", 5000) in metrics
        assert ("revenue", 2_000_000) in metrics
        assert all("position" not in m for m in data["metrics"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"text": ""}, {"text": "   \n"}, {}, {"text": 42}])
    async def test_malformed_input_is_rejected(self, client, body):
        response = await client.post(f"{API}/presentations/extract", json=body)
        assert response.status_code == 422


class TestCreatePresentation:

    @pytest.mark.asyncio
    async def test_structured_deck(self, client):
        response = await client.post(f"{API}/presentations", json={"text": RICH_TEXT})

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["companyName"] == "Acme Robotics"
        assert data["generationMode"] == "structured"
        assert data["note"]
        uuid.UUID(data["presentationId"])

        slides = data["presentation"]
        assert slides[0] == {"id": 0, "type": "intro", "title": "PitchCraft AI", "content": "Investor Presentation"}
        assert slides[-1]["title"] == "Thank You"
        financial = [s for s in slides if s["title"].endswith("Financial Projections")]
        assert len(financial) == 1
        assert financial[0]["chartData"]["type"] == "bar"
        assert all(s["imagePrompt"] for s in slides[1:])

    @pytest.mark.asyncio
    async def test_agent_failure_still_returns_deck(self, client, ai_enabled):
        with patch.object(
            presentation_controller,
            "generate_presentation_slides",
            AsyncMock(side_effect=TimeoutError("agent down")),
        ):
            response = await client.post(f"{API}/presentations", json={"text": E2E_TEXT})

        assert response.status_code == 201
        data = response.json()
        assert data["generationMode"] == "structured"
        assert data["presentation"][1]["title"] == "Acme Robotics"

    @pytest.mark.asyncio
    async def test_blank_text_is_rejected(self, client):
        response = await client.post(f"{API}/presentations", json={"text": "  "})
        assert response.status_code == 422

        listed = await client.get(f"{API}/presentations")
        assert listed.json() == []


class TestStoredPresentations:

    @pytest.mark.asyncio
    async def test_get_list_delete(self, client):
        created = (await client.post(f"{API}/presentations", json={"text": E2E_TEXT})).json()
        presentation_id = created["presentationId"]

        fetched = await client.get(f"{API}/presentations/{presentation_id}")
        assert fetched.status_code == 200
        body = fetched.json()
        assert body["id"] == presentation_id
        assert body["companyName"] == "Acme Robotics"
        assert body["slides"] == created["presentation"]
        assert "createdAt" in body

        listed = (await client.get(f"{API}/presentations")).json()
        assert [p["id"] for p in listed] == [presentation_id]
        assert listed[0]["generationMode"] == "structured"

        deleted = await client.delete(f"{API}/presentations/{presentation_id}")
        assert deleted.status_code == 204

        missing = await client.get(f"{API}/presentations/{presentation_id}")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_id(self, client):
        response = await client.delete(f"{API}/presentations/{uuid.uuid4()}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_id(self, client):
        response = await client.get(f"{API}/presentations/not-a-uuid")
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_regenerate_images(self, client):
        created = (await client.post(f"{API}/presentations", json={"text": E2E_TEXT})).json()

        with patch.object(ai_generators, "generate_image", AsyncMock(return_value="https://img/new.png")):
            response = await client.post(f"{API}/presentations/{created['presentationId']}/images")

        assert response.status_code == 200
        slides = response.json()["slides"]
        assert [s["id"] for s in slides] == [s["id"] for s in created["presentation"]]
        assert all(s["imageUrl"] == "https://img/new.png" for s in slides[1:])


class TestGenerateImages:

    @pytest.mark.asyncio
    async def test_placeholders_without_api_key(self, client):
        response = await client.post(f"{API}/images", json={"prompts": ["a robot arm"]})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "images": [placeholder_image_url("a robot arm")],
            "note": PLACEHOLDER_NOTE,
        }

    @pytest.mark.asyncio
    async def test_generated_images(self, client, ai_enabled):
        with patch.object(ai_generators, "generate_image", AsyncMock(return_value="https://img/a.png")):
            response = await client.post(f"{API}/images", json={"prompts": ["one", "two"]})

        data = response.json()
        assert data["images"] == ["https://img/a.png", "https://img/a.png"]
        assert data["note"] is None

    @pytest.mark.asyncio
    async def test_empty_prompts_rejected(self, client):
        response = await client.post(f"{API}/images", json={"prompts": []})
        assert response.status_code == 422
