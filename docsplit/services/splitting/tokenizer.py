"""Tokenizer provider for token-based splitting. Backed by tiktoken, one cached encoding per name."""

from typing import TYPE_CHECKING

from docsplit.config.logging import get_logger
from docsplit.config.splitting.models import DEFAULT_ENCODING_NAME, SUPPORTED_ENCODINGS
from docsplit.services.splitting.errors import ConfigurationError, wrap_split_failure

if TYPE_CHECKING:
    import tiktoken

logger = get_logger(__name__)

_encodings: dict[str, "tiktoken.Encoding"] = {}


def is_supported_encoding(encoding_name: str | None) -> bool:
    return (encoding_name or DEFAULT_ENCODING_NAME) in SUPPORTED_ENCODINGS


def get_encoding(encoding_name: str | None = None) -> "tiktoken.Encoding":
    """
    Lazy-load and cache the tiktoken encoding. Loading may fetch BPE files over the network
    on first use; any failure there is a SplitFailure, an unknown name a ConfigurationError.
    """
    name = encoding_name or DEFAULT_ENCODING_NAME
    if name not in SUPPORTED_ENCODINGS:
        raise ConfigurationError(f"Unsupported encoding for TokenTextSplitter: {name}")
    enc = _encodings.get(name)
    if enc is None:
        try:
            import tiktoken

            enc = tiktoken.get_encoding(name)
        except Exception as e:
            logger.warning("tiktoken encoding could not be loaded", extra={"encoding": name, "error": str(e)})
            raise wrap_split_failure(e) from e
        _encodings[name] = enc
    return enc


def encode(text: str, encoding_name: str | None = None) -> list[int]:
    """Encode text; special-token markers in user text are treated as plain text."""
    return get_encoding(encoding_name).encode(text, disallowed_special=())


def decode(token_ids: list[int], encoding_name: str | None = None) -> str:
    return get_encoding(encoding_name).decode(token_ids)


def count_tokens(text: str, encoding_name: str | None = None) -> int:
    """Return token count for text."""
    if not text:
        return 0
    return len(encode(text, encoding_name))


def slice_by_tokens(
    text: str,
    chunk_size: int,
    chunk_overlap: int,
    encoding_name: str | None = None,
) -> list[str]:
    """
    Cut text into windows of chunk_size tokens, each starting chunk_size - chunk_overlap
    tokens after the previous one. The last window may be shorter.

    Windows are cut on token boundaries, not character boundaries. A window that splits a
    multi-byte character decodes with U+FFFD in its place, so that chunk is no longer a
    verbatim slice of the source and its offsets come from the locator's fallback.
    """
    token_ids = encode(text, encoding_name)
    step = max(1, chunk_size - chunk_overlap)
    windows: list[str] = []
    start = 0
    while start < len(token_ids):
        end = min(start + chunk_size, len(token_ids))
        windows.append(decode(token_ids[start:end], encoding_name))
        if end == len(token_ids):
            break
        start += step
    return windows
