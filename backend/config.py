import os
import logging
from dotenv import load_dotenv

load_dotenv()


def _getenv_list(name: str, default: str = "") -> list[str]:
    raw = os.getenv(name, default) or ""
    raw = raw.replace("\n", " ")
    parts = [p.strip() for p in raw.split(",")]
    return [p for p in parts if p]


def _getenv_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


DEFAULT_SOURCES = ",".join([
    "https://growlity.com",
    "https://growlity.com/our-team",
    "https://growlity.com/solutions",
    "https://growlity.com/contact-us",
    "company-info.txt",
])


class Config:
    # Supabase (pgvector)
    SUPABASE_URL = os.getenv("SUPABASE_URL", "").strip()
    SUPABASE_KEY = os.getenv("SUPABASE_KEY", "").strip()
    CHUNKS_TABLE = os.getenv("CHUNKS_TABLE", "chunks").strip()
    MATCH_FUNCTION = os.getenv("MATCH_FUNCTION", "match_chunks").strip()

    # Embeddings
    EMBEDDING_MODEL = os.getenv("EMBEDDING_MODEL", "all-MiniLM-L6-v2").strip()

    # Groq
    GROQ_API_KEY = os.getenv("GROQ_API_KEY", "").strip()
    GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant").strip()
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.3"))
    LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "1024"))

    # Web search fallback (disabled when the key is empty)
    SERPAPI_KEY = os.getenv("SERPAPI_KEY", "").strip()
    WEB_SEARCH_RESULTS = int(os.getenv("WEB_SEARCH_RESULTS", "3"))

    # Scraping
    CONTENT_API_KEY = os.getenv("CONTENT_API_KEY", "").strip()
    SCRAPE_RENDER_JS = _getenv_bool("SCRAPE_RENDER_JS")
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "20"))
    SOURCE_URLS = _getenv_list("SOURCE_URLS", DEFAULT_SOURCES)
    CHUNK_MAX_WORDS = int(os.getenv("CHUNK_MAX_WORDS", "600"))

    # Retrieval
    SIMILARITY_THRESHOLD = float(os.getenv("SIMILARITY_THRESHOLD", "0.5"))
    VECTOR_SEARCH_LIMIT = int(os.getenv("VECTOR_SEARCH_LIMIT", "5"))
    HISTORY_TURNS = int(os.getenv("HISTORY_TURNS", "10"))

    # Persona
    BOT_NAME = os.getenv("BOT_NAME", "Grow AI Chatbot").strip()
    COMPANY_NAME = os.getenv("COMPANY_NAME", "Growlity").strip()
    COMPANY_DESCRIPTION = os.getenv(
        "COMPANY_DESCRIPTION", "a sustainability and ESG consulting company"
    ).strip()

    # Server
    CORS_ORIGINS = _getenv_list("CORS_ORIGINS", "*")
    HOST = os.getenv("HOST", "127.0.0.1").strip()
    PORT = int(os.getenv("PORT", "5000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
