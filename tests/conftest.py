import pytest
from unittest.mock import MagicMock

from config import Config


@pytest.fixture
def supabase_mock():
    """A Supabase client whose query-builder chain is fully mocked."""
    return MagicMock()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Pin the settings tests depend on, regardless of the local .env."""
    monkeypatch.setattr(Config, "SERPAPI_KEY", "")
    monkeypatch.setattr(Config, "CONTENT_API_KEY", "")
    monkeypatch.setattr(Config, "SCRAPE_RENDER_JS", False)
    monkeypatch.setattr(Config, "SIMILARITY_THRESHOLD", 0.5)
    monkeypatch.setattr(Config, "VECTOR_SEARCH_LIMIT", 5)
    monkeypatch.setattr(Config, "CHUNK_MAX_WORDS", 600)
    monkeypatch.setattr(Config, "HISTORY_TURNS", 10)
    monkeypatch.setattr(Config, "WEB_SEARCH_RESULTS", 3)
    monkeypatch.setattr(Config, "COMPANY_NAME", "Growlity")
    monkeypatch.setattr(Config, "CHUNKS_TABLE", "chunks")
    monkeypatch.setattr(Config, "MATCH_FUNCTION", "match_chunks")
