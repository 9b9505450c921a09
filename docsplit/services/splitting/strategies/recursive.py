"""Recursive multi-separator splitting: paragraphs, then lines, then words, then characters."""

from docsplit.config.splitting.models import SplitConfiguration
from docsplit.services.splitting.separators import DEFAULT_RECURSIVE_SEPARATORS
from docsplit.services.splitting.strategies.base import split_recursively

_ESCAPES = (("\\n", "\n"), ("\\t", "\t"), ("\\r", "\r"))


def parse_separator_list(raw: str) -> list[str]:
    """Turn 'a,b,\\n' into ['a', 'b', '\n']: split on commas, then unescape \\n, \\t and \\r."""
    separators = []
    for part in raw.split(","):
        for escaped, actual in _ESCAPES:
            part = part.replace(escaped, actual)
        separators.append(part)
    return separators


def resolve_separators(config: SplitConfiguration) -> list[str]:
    """A comma-delimited separator string wins over the separators list, which wins over the default."""
    if config.separator:
        return parse_separator_list(config.separator)
    if config.separators:
        return list(config.separators)
    return list(DEFAULT_RECURSIVE_SEPARATORS)


def recursive_chunks(text: str, config: SplitConfiguration) -> list[str]:
    return split_recursively(
        text,
        resolve_separators(config),
        config.chunk_size,
        config.chunk_overlap,
    )
