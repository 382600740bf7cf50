import logging

from config import Config
from supabase_client import get_supabase

logger = logging.getLogger(__name__)


def _table():
    return get_supabase().table(Config.CHUNKS_TABLE)


def delete_chunks(source_url):
    _table().delete().eq("source_url", source_url).execute()
    logger.info("Cleared existing chunks for %s.", source_url)


def insert_chunks(rows):
    if not rows:
        return
    # Single batch insert to reduce network round-trips
    _table().insert(rows).execute()


def replace_chunks(source_url, chunks, embeddings):
    """
    Swap every stored chunk of `source_url` for the given ones.

    Existing rows for the URL are always deleted first. Chunks whose embedding
    is None are skipped. Returns the number of rows inserted.
    """
    delete_chunks(source_url)

    rows = []
    for i, (chunk, emb) in enumerate(zip(chunks, embeddings)):
        if emb is None:
            logger.warning("Failed to generate embedding for chunk %d of %s", i + 1, source_url)
            continue
        rows.append({
            "text": chunk,
            "embedding": list(emb),
            "source_url": source_url,
        })

    insert_chunks(rows)
    return len(rows)


def count_chunks() -> int:
    response = _table().select("id", count="exact").limit(1).execute()
    return response.count or 0


def sample_chunk() -> dict | None:
    response = _table().select("text, source_url").limit(1).execute()
    if response.data:
        return response.data[0]
    return None
