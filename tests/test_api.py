"""HTTP-level tests for the chat, admin and health endpoints."""

import httpx
import groq
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from main import app
from retriever import VectorSearchError


@pytest.fixture
def client():
    return TestClient(app)


def _rate_limit_error():
    request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
    response = httpx.Response(429, request=request)
    return groq.RateLimitError("rate limited", response=response, body=None)


class TestChat:

    def test_valid_messages_return_response(self, client):
        with patch("rag.answer", return_value={"response": "Hello from Grow AI", "source": "General Knowledge"}) as mock_answer:
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hii"}]})

        assert response.status_code == 200
        assert response.json() == {"response": "Hello from Grow AI"}
        mock_answer.assert_called_once_with([{"role": "user", "content": "hii"}])

    def test_history_is_forwarded(self, client):
        messages = [
            {"role": "user", "content": "hii"},
            {"role": "model", "content": "Hello!"},
            {"role": "user", "content": "What is BRSR?"},
        ]
        with patch("rag.answer", return_value={"response": "ok", "source": "Web Search"}) as mock_answer:
            response = client.post("/api/chat", json={"messages": messages})

        assert response.status_code == 200
        assert mock_answer.call_args.args[0] == messages

    @pytest.mark.parametrize("body", [
        {"messages": []},
        {},
        {"messages": None},
        {"messages": [{"role": "user", "content": "   "}]},
    ])
    def test_invalid_messages_return_400(self, client, body):
        with patch("rag.answer") as mock_answer:
            response = client.post("/api/chat", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == "Valid messages array is required"
        mock_answer.assert_not_called()

    def test_missing_body_returns_400(self, client):
        response = client.post("/api/chat")
        assert response.status_code == 400

    def test_vector_search_failure(self, client):
        with patch("rag.answer", side_effect=VectorSearchError("match_chunks missing")):
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Vector Search Failure"
        assert "match_chunks" in body["details"]
        assert "detail" not in body

    def test_rate_limit_returns_429(self, client):
        with patch("rag.answer", side_effect=_rate_limit_error()):
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})
        assert response.status_code == 429

    def test_unexpected_failure_is_generic_500(self, client):
        with patch("rag.answer", side_effect=RuntimeError("GROQ_API_KEY secret detail")):
            response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})

        assert response.status_code == 500
        assert response.json()["detail"] == "An error occurred while processing your request."


class TestAdmin:

    def test_scrape_defaults(self, client):
        with patch("ingest.run_ingestion", return_value=7) as mock_run:
            response = client.post("/api/admin/scrape")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["chunks_saved"] == 7
        mock_run.assert_called_once_with(None)

    def test_scrape_custom_urls(self, client):
        urls = ["https://growlity.com/blog"]
        with patch("ingest.run_ingestion", return_value=3) as mock_run:
            response = client.post("/api/admin/scrape", json={"urls": urls})

        assert response.status_code == 200
        mock_run.assert_called_once_with(urls)

    def test_scrape_via_get(self, client):
        with patch("ingest.run_ingestion", return_value=0):
            response = client.get("/api/admin/scrape")
        assert response.status_code == 200

    def test_scrape_failure(self, client):
        with patch("ingest.run_ingestion", side_effect=RuntimeError("db down")):
            response = client.post("/api/admin/scrape")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "db down"
        assert body["message"] == "Failed to complete data ingestion."

    def test_stats(self, client):
        sample = {"text": "x" * 150, "source_url": "https://growlity.com"}
        with patch("store.count_chunks", return_value=12), patch("store.sample_chunk", return_value=sample):
            response = client.get("/api/admin/stats")

        assert response.status_code == 200
        body = response.json()
        assert body["total_chunks"] == 12
        assert body["sample_snippet"] == "x" * 100
        assert body["source"] == "https://growlity.com"

    def test_stats_empty_store(self, client):
        with patch("store.count_chunks", return_value=0), patch("store.sample_chunk", return_value=None):
            body = client.get("/api/admin/stats").json()

        assert body["sample_snippet"] == "No data found"
        assert body["source"] == "N/A"

    def test_stats_failure(self, client):
        with patch("store.count_chunks", side_effect=RuntimeError("SUPABASE_URL unset")):
            response = client.get("/api/admin/stats")
        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "SUPABASE_URL unset"
        assert "detail" not in body


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
