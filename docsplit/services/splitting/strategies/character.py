"""Fixed-separator splitting: cut on one separator, then merge pieces up to chunk_size characters."""

import re

from docsplit.config.splitting.models import SplitConfiguration
from docsplit.services.splitting.separators import DEFAULT_SEPARATOR
from docsplit.services.splitting.strategies.base import merge_splits, split_on_separator


def character_chunks(text: str, config: SplitConfiguration) -> list[str]:
    """
    Split on config.separator (default blank line) and re-join adjacent pieces with that
    separator while they fit. A piece longer than chunk_size is emitted on its own.
    """
    separator = DEFAULT_SEPARATOR if config.separator is None else config.separator
    pieces = split_on_separator(text, re.escape(separator), keep_separator=False)
    return merge_splits(pieces, separator, config.chunk_size, config.chunk_overlap)
