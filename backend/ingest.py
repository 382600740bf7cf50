import sys
import logging

from config import Config, setup_logging
from scraper import scrape_source
from chunker import chunk_text
from embeddings import embed_chunks
from store import replace_chunks

logger = logging.getLogger(__name__)


def ingest_source(source):
    """Scrape, chunk, embed and store one source. Returns chunks saved."""
    logger.info("--- Starting ingestion for: %s ---", source)
    text = scrape_source(source)
    if not text or not text.strip():
        logger.warning("Failed to scrape text from %s. Skipping...", source)
        return 0

    logger.info("Scraped %d words from %s.", len(text.split()), source)
    chunks = chunk_text(text)
    logger.info("Created %d chunks.", len(chunks))

    embeddings = embed_chunks(chunks)
    saved = replace_chunks(source, chunks, embeddings)
    logger.info("--- Finished ingestion for: %s (%d chunks saved) ---", source, saved)
    return saved


def run_ingestion(sources=None):
    sources = sources or Config.SOURCE_URLS

    total = 0
    for source in sources:
        total += ingest_source(source)

    logger.info("All ingestion completed. Total chunks saved: %d", total)
    return total


if __name__ == "__main__":
    setup_logging()
    run_ingestion(sys.argv[1:] or None)
