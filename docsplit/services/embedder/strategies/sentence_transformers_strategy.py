"""Sentence Transformers (local) embedding strategy."""

from typing import TYPE_CHECKING

from docsplit.config.embedding.models import EmbeddingConfig
from docsplit.config.logging import get_logger
from docsplit.services.embedder.base import BlockingEmbeddingStrategy

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer

logger = get_logger(__name__)

# Loaded models are shared across requests; loading is the expensive part.
_models: dict[str, "SentenceTransformer"] = {}


def _get_model(model_name: str) -> "SentenceTransformer":
    model = _models.get(model_name)
    if model is None:
        from sentence_transformers import SentenceTransformer

        logger.info("Loading sentence-transformers model", extra={"model": model_name})
        model = SentenceTransformer(model_name)
        _models[model_name] = model
    return model


class SentenceTransformersEmbeddingStrategy(BlockingEmbeddingStrategy):
    """Local model, default sentence-transformers/all-MiniLM-L6-v2. No credentials."""

    @property
    def strategy_name(self) -> str:
        return "sentence_transformers"

    def encode(self, sentences: list[str], config: EmbeddingConfig) -> list[list[float]]:
        vectors = _get_model(config.model).encode(
            sentences,
            batch_size=config.batch_size,
            show_progress_bar=False,
            convert_to_numpy=True,
        )
        return [v.tolist() for v in vectors]
