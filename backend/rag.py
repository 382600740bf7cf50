import logging

from config import Config
from embeddings import embed_text
from llm import build_prompt, generate_response
from retriever import filter_confident, vector_search
from web_search import web_search

logger = logging.getLogger(__name__)

GENERAL_KNOWLEDGE = "General Knowledge"


def format_documents(hits):
    context = f"--- {Config.COMPANY_NAME.upper()} INTERNAL DOCUMENTS ---\n"
    context += "\n\n".join(h["text"] for h in hits) + "\n\n"
    return context


def format_web_results(results):
    lines = [f"{r['title']}: {r['snippet']} ({r['url']})" for r in results]
    return "--- WEB SEARCH RESULTS ---\n" + "\n".join(lines) + "\n\n"


def answer(messages):
    """
    Answer the last message of a conversation.

    Returns {"response": str, "source": str} where `source` names what grounded
    the answer. VectorSearchError and Groq errors propagate to the caller.
    """
    query = messages[-1]["content"]
    history = messages[:-1]
    logger.info("Received query: %s", query)

    context = ""
    sources = []

    query_embedding = embed_text(query)
    confident = []
    if query_embedding is not None:
        hits = vector_search(query_embedding)
        logger.info("Vector search returned %d results.", len(hits))
        for i, h in enumerate(hits):
            logger.info("Result %d: Score %.4f - Snippet: %s...", i + 1, h["score"], h["text"][:50])
        confident = filter_confident(hits)
    else:
        logger.warning("No query embedding; skipping vector search")

    if confident:
        context += format_documents(confident)
        sources.append(f"{Config.COMPANY_NAME} Documents (RAG)")
    else:
        results = web_search(query)
        if results:
            context += format_web_results(results)
            sources.append("Web Search")

    source = " + ".join(sources) or GENERAL_KNOWLEDGE
    logger.info("Using source: %s", source)

    response = generate_response(history, build_prompt(query, context))
    return {"response": response, "source": source}
