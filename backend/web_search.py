"""Web search used when the company documents have no confident match."""

import logging

import requests

from config import Config

logger = logging.getLogger(__name__)

SERPAPI_URL = "https://serpapi.com/search.json"


def web_search(query: str, count: int | None = None) -> list[dict]:
    # Uses SerpAPI if SERPAPI_KEY is present; otherwise returns [].
    if not Config.SERPAPI_KEY:
        logger.debug("SERPAPI_KEY not set; skipping web search")
        return []
    if count is None:
        count = Config.WEB_SEARCH_RESULTS

    params = {"engine": "google", "q": query, "num": count, "api_key": Config.SERPAPI_KEY}
    try:
        r = requests.get(SERPAPI_URL, params=params, timeout=Config.HTTP_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Web search failed: %s", e)
        return []

    out = []
    for item in (data.get("organic_results") or [])[:count]:
        out.append({
            "title": item.get("title") or "",
            "url": item.get("link") or "",
            "snippet": item.get("snippet") or "",
        })
    return out
