import logging

from sentence_transformers import SentenceTransformer

from config import Config

logger = logging.getLogger(__name__)

_model: SentenceTransformer | None = None


def _pick_device() -> str:
    try:
        import torch
        if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
            return "mps"
    except ImportError:
        pass
    return "cpu"


def get_model() -> SentenceTransformer:
    global _model
    if _model is None:
        device = _pick_device()
        logger.info("Loading embedding model %s on %s", Config.EMBEDDING_MODEL, device)
        _model = SentenceTransformer(Config.EMBEDDING_MODEL, device=device)
    return _model


def embed_text(text: str) -> list[float] | None:
    """Embed a single text. Returns None on failure so callers can skip it."""
    try:
        vector = get_model().encode(
            text,
            show_progress_bar=False,
            convert_to_numpy=True,
            normalize_embeddings=True,
        )
    except Exception as e:
        logger.error("Error generating embedding: %s", e)
        return None
    return vector.tolist()


def embed_chunks(chunks):
    # One chunk at a time; a failed chunk leaves None in its slot
    embeddings = []
    for i, chunk in enumerate(chunks):
        logger.debug("Processing chunk %d/%d...", i + 1, len(chunks))
        embeddings.append(embed_text(chunk))
    return embeddings
