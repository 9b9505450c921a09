"""Splitting strategy implementations, one per SplitterType."""

from typing import Awaitable, Callable

from docsplit.config.splitting.models import SplitConfiguration, SplitterType
from docsplit.services.embedder.base import SentenceEmbedder
from docsplit.services.splitting.errors import ConfigurationError
from docsplit.services.splitting.strategies.character import character_chunks
from docsplit.services.splitting.strategies.recursive import recursive_chunks
from docsplit.services.splitting.strategies.semantic import semantic_chunks
from docsplit.services.splitting.strategies.structured import code_chunks, latex_chunks, markdown_chunks
from docsplit.services.splitting.strategies.token import token_chunks

SplitterFn = Callable[[str, SplitConfiguration, SentenceEmbedder | None], Awaitable[list[str]]]


def _size_based(fn: Callable[[str, SplitConfiguration], list[str]]) -> SplitterFn:
    """Lift a synchronous size-based splitter to the common async signature."""

    async def run(text: str, config: SplitConfiguration, _embedder: SentenceEmbedder | None) -> list[str]:
        return fn(text, config)

    run.__name__ = fn.__name__
    return run


STRATEGY_REGISTRY: dict[SplitterType, SplitterFn] = {
    SplitterType.FIXED_SEPARATOR: _size_based(character_chunks),
    SplitterType.RECURSIVE: _size_based(recursive_chunks),
    SplitterType.TOKEN: _size_based(token_chunks),
    SplitterType.MARKDOWN: _size_based(markdown_chunks),
    SplitterType.LATEX: _size_based(latex_chunks),
    SplitterType.CODE: _size_based(code_chunks),
    SplitterType.SEMANTIC: semantic_chunks,
}


def get_strategy_fn(splitter_type: SplitterType | str) -> SplitterFn:
    """Return the splitter for the given type. Raises ConfigurationError for an unknown type."""
    try:
        return STRATEGY_REGISTRY[SplitterType(splitter_type)]
    except (KeyError, ValueError) as e:
        raise ConfigurationError(f"Unknown splitter type: {splitter_type}") from e
