"""Builds the SentenceEmbedder handed to the semantic chunker from an embedding profile."""

from typing import Any

from docsplit.config.embedding.models import EmbeddingConfig
from docsplit.config.embedding.static import resolve_embedding_config
from docsplit.config.logging import get_logger
from docsplit.config.settings import get_settings
from docsplit.services.embedder.base import BaseEmbeddingStrategy
from docsplit.services.embedder.strategies import CREDENTIALED_STRATEGIES, get_embedding_strategy

logger = get_logger(__name__)


class StrategyEmbedder:
    """
    Binds a strategy to one resolved EmbeddingConfig. embed awaits the strategy directly,
    so cancelling the caller cancels the provider request. No retries and no caching.
    """

    def __init__(self, strategy: BaseEmbeddingStrategy, config: EmbeddingConfig) -> None:
        self._strategy = strategy
        self._config = config

    @property
    def strategy_name(self) -> str:
        return self._strategy.strategy_name

    @property
    def config(self) -> EmbeddingConfig:
        return self._config

    async def embed(self, sentences: list[str]) -> list[list[float]]:
        if not sentences:
            return []
        logger.debug(
            "Embedding sentences",
            extra={"strategy": self.strategy_name, "model": self._config.model, "count": len(sentences)},
        )
        return await self._strategy.embed_sentences(sentences, self._config)


def _with_credentials(config: EmbeddingConfig) -> EmbeddingConfig:
    if config.strategy not in CREDENTIALED_STRATEGIES or config.api_key:
        return config
    api_key = get_settings().openai_api_key
    if not api_key:
        raise ValueError("OpenAI API key is required (set OPENAI_API_KEY or pass api_key)")
    return config.model_copy(update={"api_key": api_key})


def build_embedder(profile_name: str, inline_config: dict[str, Any] | None = None) -> StrategyEmbedder:
    """
    Resolve an embedding profile (plus overrides) and its credentials into a ready embedder.
    Strategies only ever see this explicit config. Raises ValueError for an unknown profile
    or strategy, or a missing API key.
    """
    config = resolve_embedding_config(profile_name, inline_config)
    strategy = get_embedding_strategy(config.strategy)
    if strategy is None:
        raise ValueError(f"Unknown embedding strategy: {config.strategy!r}")
    return StrategyEmbedder(strategy, _with_credentials(config))
