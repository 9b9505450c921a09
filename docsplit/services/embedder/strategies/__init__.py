"""Embedding strategies by name, as referenced by the "strategy" field of embedding profiles."""

from docsplit.services.embedder.base import BaseEmbeddingStrategy
from docsplit.services.embedder.strategies.mock_strategy import MockEmbeddingStrategy
from docsplit.services.embedder.strategies.openai_strategy import OpenAIEmbeddingStrategy
from docsplit.services.embedder.strategies.sentence_transformers_strategy import (
    SentenceTransformersEmbeddingStrategy,
)

STRATEGY_REGISTRY: dict[str, type[BaseEmbeddingStrategy]] = {
    cls().strategy_name: cls
    for cls in (OpenAIEmbeddingStrategy, SentenceTransformersEmbeddingStrategy, MockEmbeddingStrategy)
}

# Strategies that need an API key in EmbeddingConfig before they can run
CREDENTIALED_STRATEGIES = frozenset({"openai"})


def get_embedding_strategy(strategy_name: str) -> BaseEmbeddingStrategy | None:
    """Return a fresh strategy instance, or None for an unknown name."""
    cls = STRATEGY_REGISTRY.get(strategy_name)
    return cls() if cls is not None else None
