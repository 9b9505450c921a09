"""Embedding contracts: provider strategies and the sentence embedder seam used by semantic chunking."""

import asyncio
from abc import ABC, abstractmethod
from typing import Protocol

from docsplit.config.embedding.models import EmbeddingConfig


class BaseEmbeddingStrategy(ABC):
    """
    Abstract embedding strategy. embed_sentences returns one vector per sentence, in order,
    with a consistent dimension, and must stop its provider request when the awaiting task
    is cancelled.
    """

    @abstractmethod
    async def embed_sentences(self, sentences: list[str], config: EmbeddingConfig) -> list[list[float]]:
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'openai', 'sentence_transformers'."""
        ...


class BlockingEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Base for in-process models with only a blocking API. encode runs in a worker thread;
    on cancellation the caller stops waiting but the thread finishes its batch and the
    result is discarded.
    """

    @abstractmethod
    def encode(self, sentences: list[str], config: EmbeddingConfig) -> list[list[float]]:
        ...

    async def embed_sentences(self, sentences: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not sentences:
            return []
        return await asyncio.to_thread(self.encode, sentences, config)


class SentenceEmbedder(Protocol):
    """What the semantic chunker needs: one vector per sentence, same order. May suspend on network I/O."""

    async def embed(self, sentences: list[str]) -> list[list[float]]:
        ...
