"""
Splitter: takes raw text + configuration and returns chunks with offsets and statistics.
Orchestration: select strategy → split → locate chunks in the source → summarize.
"""

from dataclasses import dataclass, field
from typing import Any

from docsplit.config.logging import get_logger, log_extra
from docsplit.config.splitting.models import SplitConfiguration, SplitterType
from docsplit.services.embedder.base import SentenceEmbedder
from docsplit.services.splitting.errors import SplitError, wrap_split_failure
from docsplit.services.splitting.locator import locate_chunks
from docsplit.services.splitting.statistics import SplitStatistics, compute_statistics
from docsplit.services.splitting.strategies import get_strategy_fn
from docsplit.utils.time import elapsed_ms, monotonic_ms

logger = get_logger(__name__)


@dataclass(frozen=True)
class Chunk:
    """One emitted chunk. Every field is fixed at creation."""

    index: int
    content: str
    start_index: int
    end_index: int
    chunk_size: int
    chunk_overlap: int
    source: dict[str, Any] | None = None

    @property
    def length(self) -> int:
        return len(self.content)

    def to_dict(self) -> dict[str, Any]:
        metadata: dict[str, Any] = {
            "startIndex": self.start_index,
            "endIndex": self.end_index,
            "length": self.length,
            "chunkSize": self.chunk_size,
            "chunkOverlap": self.chunk_overlap,
        }
        if self.source is not None:
            metadata["source"] = self.source
        return {"index": self.index, "content": self.content, "metadata": metadata}


@dataclass(frozen=True)
class SplitResult:
    chunks: list[Chunk]
    splitter_type: SplitterType
    parameters: SplitConfiguration
    statistics: SplitStatistics
    total_chunks: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_chunks", len(self.chunks))

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible response body."""
        return {
            "chunks": [c.to_dict() for c in self.chunks],
            "totalChunks": self.total_chunks,
            "splitterType": self.splitter_type.value,
            "parameters": self.parameters.to_wire(),
            "statistics": self.statistics.to_dict(),
        }


def build_chunks(
    texts: list[str],
    original_text: str,
    config: SplitConfiguration,
    source: dict[str, Any] | None = None,
) -> list[Chunk]:
    """Attach index and source offsets to each chunk string, in emission order."""
    spans = locate_chunks(texts, original_text)
    return [
        Chunk(
            index=i,
            content=text,
            start_index=span.start_index,
            end_index=span.end_index,
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap,
            source=source,
        )
        for i, (text, span) in enumerate(zip(texts, spans))
    ]


async def split_text(
    text: str,
    config: SplitConfiguration,
    *,
    embedder: SentenceEmbedder | None = None,
    source: dict[str, Any] | None = None,
) -> SplitResult:
    """
    Split text with the strategy selected by config.splitter_type.

    The configuration is expected to have passed validate_config already. Raises
    ConfigurationError for an unusable configuration and SplitFailure when the
    strategy fails; no partial result is ever returned. embedder is required only
    for SemanticChunker.
    """
    start = monotonic_ms()
    strategy_fn = get_strategy_fn(config.splitter_type)
    try:
        texts = await strategy_fn(text, config, embedder)
    except SplitError:
        raise
    except Exception as e:
        logger.exception("Splitter raised unexpectedly", **log_extra({"splitter_type": config.splitter_type.value}))
        raise wrap_split_failure(e) from e

    chunks = build_chunks(texts, text, config, source)
    statistics = compute_statistics([c.length for c in chunks], elapsed_ms(start))
    logger.info(
        "Text split",
        **log_extra(
            {
                "splitter_type": config.splitter_type.value,
                "text_length": len(text),
                "total_chunks": len(chunks),
                "processing_time_ms": statistics.processing_time_ms,
            }
        ),
    )
    return SplitResult(
        chunks=chunks,
        splitter_type=config.splitter_type,
        parameters=config,
        statistics=statistics,
    )
