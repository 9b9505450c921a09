"""
Semantic chunking: sentences are embedded, adjacent sentences compared by cosine
similarity, and chunks closed where the similarity drops (per breakpoint strategy).
chunk_size and chunk_overlap play no part here.
"""

import asyncio
import re

from docsplit.config.logging import get_logger
from docsplit.config.splitting.models import BreakpointStrategy, SplitConfiguration
from docsplit.services.embedder.base import SentenceEmbedder
from docsplit.services.splitting.breakpoints import detect_breakpoints
from docsplit.services.splitting.errors import ConfigurationError, SplitError, SplitFailure, wrap_split_failure
from docsplit.services.splitting.similarity import adjacent_similarities

logger = get_logger(__name__)

_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop fragments that are empty after trimming."""
    return [s.strip() for s in _SENTENCE_TERMINATORS.split(text) if s.strip()]


def group_sentences(sentences: list[str], breakpoints: set[int]) -> list[str]:
    """Close a chunk after every breakpoint index and after the last sentence."""
    chunks: list[str] = []
    current: list[str] = []
    last = len(sentences) - 1
    for idx, sentence in enumerate(sentences):
        current.append(sentence)
        if idx in breakpoints or idx == last:
            chunks.append(". ".join(current) + ".")
            current = []
    return [c for c in chunks if c.strip()]


async def semantic_chunks(
    text: str,
    config: SplitConfiguration,
    embedder: SentenceEmbedder | None,
) -> list[str]:
    """
    Raises SplitFailure when the embedder fails or answers with the wrong number of
    vectors; the provider's message is kept. Cancellation propagates untouched.
    """
    sentences = split_sentences(text)
    if not sentences:
        return [text]
    if embedder is None:
        raise ConfigurationError("SemanticChunker requires an embedding provider")

    try:
        vectors = await embedder.embed(sentences)
        if len(vectors) != len(sentences):
            raise SplitFailure(
                f"Failed to split text: embedding provider returned {len(vectors)} vectors for {len(sentences)} sentences"
            )
        similarities = adjacent_similarities(vectors)
    except asyncio.CancelledError:
        logger.info("Semantic split cancelled while waiting for embeddings", extra={"sentences": len(sentences)})
        raise
    except SplitError:
        raise
    except Exception as e:
        logger.warning("Embedding provider failed", extra={"error": str(e), "error_type": type(e).__name__})
        raise wrap_split_failure(e) from e

    strategy = config.breakpoint_strategy or BreakpointStrategy.PERCENTILE
    breakpoints = detect_breakpoints(similarities, strategy)
    logger.debug(
        "Semantic breakpoints detected",
        extra={"sentences": len(sentences), "breakpoints": len(breakpoints), "strategy": strategy.value},
    )
    return group_sentences(sentences, breakpoints)
