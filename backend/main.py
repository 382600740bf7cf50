import logging

import groq
import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import Config, setup_logging

setup_logging()
logger = logging.getLogger(__name__)

# Lazy-import heavy modules inside endpoints to keep startup light

app = FastAPI(title=Config.BOT_NAME)

# --- CORS for the embeddable chat widget ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

VECTOR_SEARCH_HINT = (
    f"Please ensure the '{Config.MATCH_FUNCTION}' function exists in Supabase "
    f"and the '{Config.CHUNKS_TABLE}' table has a pgvector 'embedding' column."
)


# --- Pydantic Models ---
class ChatMessage(BaseModel):
    role: str = "user"
    content: str = ""


class ChatRequest(BaseModel):
    # Full client-held history; the last entry is the question being asked
    messages: list[ChatMessage] | None = None


class ScrapeRequest(BaseModel):
    urls: list[str] | None = None


# --- Endpoints ---
@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/chat")
def chat(req: ChatRequest | None = None):
    if req is None or not req.messages or not req.messages[-1].content.strip():
        raise HTTPException(status_code=400, detail="Valid messages array is required")

    from rag import answer
    from retriever import VectorSearchError

    messages = [m.model_dump() for m in req.messages]
    try:
        result = answer(messages)
    except VectorSearchError as e:
        logger.error("Vector search failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": "Vector Search Failure", "details": VECTOR_SEARCH_HINT},
        )
    except groq.RateLimitError as e:
        logger.warning("LLM rate limited: %s", e)
        raise HTTPException(
            status_code=429,
            detail="Too many requests right now. Please try again shortly.",
        )
    except Exception:
        logger.exception("Error handling chat")
        raise HTTPException(
            status_code=500,
            detail="An error occurred while processing your request.",
        )

    return {"response": result["response"]}


@app.api_route("/api/admin/scrape", methods=["GET", "POST"])
def admin_scrape(req: ScrapeRequest | None = None):
    from ingest import run_ingestion

    logger.info("--- ADMIN: Manual Scrape Triggered ---")
    urls = req.urls if req else None
    try:
        saved = run_ingestion(urls or None)
    except Exception as e:
        logger.exception("Admin scrape error")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Failed to complete data ingestion.",
                "error": str(e),
            },
        )

    return {
        "success": True,
        "message": "Extraction completed successfully.",
        "chunks_saved": saved,
    }


@app.get("/api/admin/stats")
def admin_stats():
    from store import count_chunks, sample_chunk

    try:
        total = count_chunks()
        sample = sample_chunk()
    except Exception as e:
        logger.exception("Admin stats error")
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    return {
        "success": True,
        "total_chunks": total,
        "sample_snippet": sample["text"][:100] if sample else "No data found",
        "source": sample["source_url"] if sample else "N/A",
    }


# --- Startup Logic ---
if __name__ == "__main__":
    uvicorn.run("main:app", host=Config.HOST, port=Config.PORT)
