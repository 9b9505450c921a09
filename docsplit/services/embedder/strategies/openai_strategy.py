"""OpenAI embeddings over the async client, so a cancelled split aborts the HTTP request."""

from openai import AsyncOpenAI

from docsplit.config.embedding.models import EmbeddingConfig
from docsplit.config.logging import get_logger
from docsplit.services.embedder.base import BaseEmbeddingStrategy

logger = get_logger(__name__)

# Max inputs per embeddings request accepted by the API
_MAX_BATCH = 2048


class OpenAIEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Sentence vectors from the OpenAI embeddings endpoint (text-embedding-3-small and friends).
    config.api_key must already be resolved; build_embedder fills it from settings.
    """

    @property
    def strategy_name(self) -> str:
        return "openai"

    async def embed_sentences(self, sentences: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not sentences:
            return []
        if not config.api_key:
            raise ValueError("OpenAI embedding config has no api_key")
        batch_size = min(config.batch_size, _MAX_BATCH)
        vectors: list[list[float]] = []
        async with AsyncOpenAI(api_key=config.api_key) as client:
            for start in range(0, len(sentences), batch_size):
                batch = sentences[start : start + batch_size]
                response = await client.embeddings.create(model=config.model, input=batch)
                # The API tags each vector with its input position
                ordered = sorted(response.data, key=lambda item: item.index)
                if len(ordered) != len(batch):
                    raise ValueError(f"OpenAI returned {len(ordered)} embeddings for a batch of {len(batch)}")
                vectors.extend(item.embedding for item in ordered)
        logger.debug("OpenAI embeddings received", extra={"model": config.model, "count": len(vectors)})
        return vectors
