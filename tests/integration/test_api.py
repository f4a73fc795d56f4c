"""Integration tests for the HTTP API."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from faq_matcher.api.server import create_app
from faq_matcher.assistant import FALLBACK_TEXT, FaqAssistant
from faq_matcher.storage.intent_catalog import IntentCatalog


@pytest.fixture
def client(catalog: IntentCatalog) -> Iterator[TestClient]:
    """Client for an app serving the packaged catalog."""
    app = create_app()
    app.state.assistant = FaqAssistant(catalog)
    with TestClient(app) as test_client:
        yield test_client


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["catalog_stats"]["num_intents"] == 9

    def test_response_headers(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "X-Request-ID" in response.headers
        assert "X-Processing-Time-Ms" in response.headers

    def test_request_id_echoed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_metrics(self, client: TestClient) -> None:
        client.post("/v1/match", json={"query": "show me your cv"})
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "faq_match_total" in response.text


class TestMatch:
    """Tests for the matching endpoints."""

    def test_match(self, client: TestClient) -> None:
        response = client.post("/v1/match", json={"query": "show me your cv"})
        assert response.status_code == 200
        data = response.json()
        assert data["matched"] is True
        assert data["intent_id"] == "resume"
        assert data["title"] == "Resume"
        assert data["score"] > 1.0
        assert data["normalized_query"] == "show me your cv"

    def test_no_match(self, client: TestClient) -> None:
        response = client.post("/v1/match", json={"query": "what is the weather today"})
        data = response.json()
        assert data["matched"] is False
        assert data["intent_id"] is None
        assert data["threshold"] == pytest.approx(0.3)

    def test_blank_query(self, client: TestClient) -> None:
        data = client.post("/v1/match", json={"query": "   "}).json()
        assert data["matched"] is False
        assert data["score"] == 0.0

    def test_threshold_override(self, client: TestClient) -> None:
        body = {"query": "model behavior lab", "threshold": 0.6}
        data = client.post("/v1/match", json=body).json()
        assert data["matched"] is False
        assert data["score"] == pytest.approx(0.5)

    def test_negative_threshold_rejected(self, client: TestClient) -> None:
        response = client.post("/v1/match", json={"query": "cv", "threshold": -1})
        assert response.status_code == 422

    def test_explain(self, client: TestClient) -> None:
        body = {"query": "python langchain docker", "top_k": 3}
        data = client.post("/v1/match/explain", json=body).json()
        assert data["intent_id"] == "skills-stack"
        assert len(data["scores"]) == 3
        assert data["scores"][0]["intent_id"] == "skills-stack"
        combined = [score["combined_score"] for score in data["scores"]]
        assert combined == sorted(combined, reverse=True)


class TestChat:
    """Tests for the chat endpoints."""

    def test_chat_match(self, client: TestClient) -> None:
        data = client.post("/v1/chat", json={"message": "contact info"}).json()
        assert data["intent_id"] == "contact-links"
        assert data["is_fallback"] is False
        assert data["links"][0]["href"] == "mailto:chunduri@usc.edu"

    def test_chat_fallback(self, client: TestClient) -> None:
        data = client.post("/v1/chat", json={"message": "what is the weather today"}).json()
        assert data["is_fallback"] is True
        assert data["text"] == FALLBACK_TEXT
        assert len(data["suggestions"]) == 5

    def test_chat_blank_message(self, client: TestClient) -> None:
        response = client.post("/v1/chat", json={"message": "  "})
        assert response.status_code == 400
        assert "detail" in response.json()

    def test_intro(self, client: TestClient) -> None:
        data = client.get("/v1/chat/intro").json()
        assert data["text"].startswith("I'm a lightweight FAQ bot")
        assert len(data["suggestions"]) == 5

    def test_suggestions(self, client: TestClient) -> None:
        data = client.get("/v1/chat/suggestions").json()
        assert data[0] == {"intent_id": "summarize-projects", "label": "Projects"}

    def test_quick_reply(self, client: TestClient) -> None:
        data = client.post("/v1/chat/quick-reply/resume").json()
        assert data["intent_id"] == "resume"

    def test_quick_reply_unknown(self, client: TestClient) -> None:
        response = client.post("/v1/chat/quick-reply/nope")
        assert response.status_code == 404
        assert response.json() == {"detail": "Intent not found: nope"}


class TestIntents:
    """Tests for the catalog endpoints."""

    def test_list(self, client: TestClient) -> None:
        data = client.get("/v1/intents").json()
        assert len(data) == 9
        assert data[0]["id"] == "about-me"

    def test_get(self, client: TestClient) -> None:
        data = client.get("/v1/intents/resume").json()
        assert data["id"] == "resume"
        assert "cv" in data["tags"]

    def test_get_unknown(self, client: TestClient) -> None:
        response = client.get("/v1/intents/nope")
        assert response.status_code == 404
