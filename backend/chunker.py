from config import Config


def chunk_text(text, max_words=None):
    """Split text into consecutive chunks of at most `max_words` words."""
    if max_words is None:
        max_words = Config.CHUNK_MAX_WORDS
    if max_words < 1:
        raise ValueError("max_words must be at least 1")

    words = (text or "").split()
    chunks = []

    start = 0
    while start < len(words):
        chunks.append(" ".join(words[start:start + max_words]))
        start += max_words

    return chunks
