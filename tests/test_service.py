"""
HTTP contract tests for the generation service.
"""

import re

import pytest

from autofoundr.main import DEFAULT_IDEA


class TestGenerateEndpoint:
    def test_generate_returns_bundle(self, service_client):
        response = service_client.post("/generate", json={"idea": "eco-friendly phone case"})
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"brand", "product", "ads"}
        assert set(data["brand"]) == {"name", "logo"}
        assert set(data["product"]) == {"title", "description", "price"}
        assert data["product"]["title"] == "Eco-friendly phone case — Premium Edition"
        assert len(data["ads"]) == 3
        assert all("eco-friendly phone case" in ad for ad in data["ads"])
        assert "eco-friendly+phone+case" in data["brand"]["logo"]
        assert re.match(r"^\$\d+\.\d{2}$", data["product"]["price"])

    @pytest.mark.parametrize("body", [{}, {"idea": None}, {"idea": ""}])
    def test_absent_idea_uses_default_phrase(self, service_client, body):
        response = service_client.post("/generate", json=body)
        assert response.status_code == 200
        data = response.json()
        assert DEFAULT_IDEA == "cool product"
        assert data["product"]["title"] == "Cool product — Premium Edition"
        assert "cool+product" in data["brand"]["logo"]
        assert all("cool product" in ad for ad in data["ads"])

    def test_get_not_allowed(self, service_client):
        response = service_client.get("/generate")
        assert response.status_code == 405

    def test_wrong_type_rejected(self, service_client):
        response = service_client.post("/generate", json={"idea": ["not", "a", "string"]})
        assert response.status_code == 422

    def test_repeated_calls_vary(self, service_client):
        seen = set()
        for _ in range(40):
            data = service_client.post("/generate", json={"idea": "desk lamp"}).json()
            seen.add((data["brand"]["name"], data["product"]["price"]))
        assert len(seen) > 1


class TestHealth:
    def test_health(self, service_client):
        response = service_client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "generation"
