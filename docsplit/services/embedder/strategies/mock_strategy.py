"""Deterministic offline embeddings for tests and local runs without provider credentials."""

import hashlib

from docsplit.config.embedding.models import EmbeddingConfig
from docsplit.services.embedder.base import BaseEmbeddingStrategy

MOCK_DEFAULT_DIM = 384


def _dimension(model: str) -> int:
    # "mock-768" -> 768
    suffix = model.rsplit("-", 1)[-1]
    return int(suffix) if suffix.isdigit() else MOCK_DEFAULT_DIM


def sentence_vector(sentence: str, dim: int) -> list[float]:
    """Unit vector seeded from the sentence's SHA-256, stable across processes."""
    seed = int.from_bytes(hashlib.sha256(sentence.encode("utf-8")).digest()[:4], "big")
    vec = [float((seed + j * 7919) % 1000) / 1000.0 for j in range(dim)]
    norm = sum(x * x for x in vec) ** 0.5 or 1.0
    return [x / norm for x in vec]


class MockEmbeddingStrategy(BaseEmbeddingStrategy):
    @property
    def strategy_name(self) -> str:
        return "mock"

    async def embed_sentences(self, sentences: list[str], config: EmbeddingConfig) -> list[list[float]]:
        dim = _dimension(config.model)
        return [sentence_vector(s, dim) for s in sentences]
