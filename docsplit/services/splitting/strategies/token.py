"""Token-count splitting: recursive splitting where sizes are measured in tiktoken tokens."""

from functools import partial

from docsplit.config.splitting.models import DEFAULT_ENCODING_NAME, SplitConfiguration
from docsplit.services.splitting.separators import DEFAULT_RECURSIVE_SEPARATORS
from docsplit.services.splitting.strategies.base import split_recursively
from docsplit.services.splitting.tokenizer import count_tokens, get_encoding, slice_by_tokens

# "" is left out: a word that is still too long is cut into token windows instead of characters.
TOKEN_SEPARATORS: list[str] = [s for s in DEFAULT_RECURSIVE_SEPARATORS if s]


def token_chunks(text: str, config: SplitConfiguration) -> list[str]:
    """
    chunk_size and chunk_overlap count tokens of config.encoding_name (default cl100k_base).
    Raises ConfigurationError for an unknown encoding and SplitFailure when tiktoken cannot load it.
    """
    encoding_name = config.encoding_name or DEFAULT_ENCODING_NAME
    get_encoding(encoding_name)
    return split_recursively(
        text,
        TOKEN_SEPARATORS,
        config.chunk_size,
        config.chunk_overlap,
        length_function=partial(count_tokens, encoding_name=encoding_name),
        split_oversized=partial(
            slice_by_tokens,
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap,
            encoding_name=encoding_name,
        ),
    )
