import logging

import numpy as np

from config import Config
from supabase_client import get_supabase

logger = logging.getLogger(__name__)


class VectorSearchError(RuntimeError):
    """The similarity search against the chunks table failed."""


def vector_search(query_embedding, limit=None):
    if limit is None:
        limit = Config.VECTOR_SEARCH_LIMIT

    # Convert numpy array to list for JSON serialization
    if isinstance(query_embedding, np.ndarray):
        query_embedding = query_embedding.tolist()

    try:
        response = get_supabase().rpc(
            Config.MATCH_FUNCTION,
            {
                "query_embedding": query_embedding,
                "match_count": limit,
            },
        ).execute()
    except Exception as e:
        raise VectorSearchError(f"{Config.MATCH_FUNCTION} failed: {e}") from e

    return [
        {
            "text": row.get("text", ""),
            "source_url": row.get("source_url"),
            "score": float(row.get("score") or 0.0),
        }
        for row in (response.data or [])
    ]


def filter_confident(results, threshold=None):
    """Keep only hits whose similarity is strictly above the threshold."""
    if threshold is None:
        threshold = Config.SIMILARITY_THRESHOLD
    return [r for r in results if r["score"] > threshold]
