"""
Shared primitives for size-based splitters: separator splitting, piece merging
with overlap, and recursive descent through a separator priority list.
"""

import re
from typing import Callable

from docsplit.config.logging import get_logger

logger = get_logger(__name__)

LengthFn = Callable[[str], int]


def split_on_separator(text: str, pattern: str, keep_separator: bool) -> list[str]:
    """
    Split text on a regex pattern, dropping empty pieces. An empty pattern splits into characters.
    With keep_separator the matched separator is kept at the start of the piece that follows it.
    """
    if not pattern:
        return list(text)
    if not keep_separator:
        return [piece for piece in re.split(pattern, text) if piece]
    parts = re.split(f"({pattern})", text)
    pieces = [parts[0]] + [parts[i] + parts[i + 1] for i in range(1, len(parts) - 1, 2)]
    return [piece for piece in pieces if piece]


def _join(pieces: list[str], separator: str) -> str | None:
    joined = separator.join(pieces).strip()
    return joined or None


def merge_splits(
    pieces: list[str],
    separator: str,
    chunk_size: int,
    chunk_overlap: int,
    length_function: LengthFn = len,
) -> list[str]:
    """
    Greedily join pieces into chunks no longer than chunk_size. When a chunk is closed,
    pieces are dropped from its front until at most chunk_overlap of it remains; those
    trailing pieces open the next chunk. A single piece longer than chunk_size becomes
    its own oversized chunk.
    """
    sep_len = length_function(separator)
    chunks: list[str] = []
    current: list[str] = []
    total = 0
    for piece in pieces:
        piece_len = length_function(piece)
        if total + piece_len + (sep_len if current else 0) > chunk_size:
            if total > chunk_size:
                logger.warning(
                    "Created a chunk of size %d, which is longer than the specified %d", total, chunk_size
                )
            if current:
                chunk = _join(current, separator)
                if chunk is not None:
                    chunks.append(chunk)
                while total > chunk_overlap or (
                    total + piece_len + (sep_len if current else 0) > chunk_size and total > 0
                ):
                    total -= length_function(current[0]) + (sep_len if len(current) > 1 else 0)
                    current.pop(0)
        current.append(piece)
        total += piece_len + (sep_len if len(current) > 1 else 0)
    chunk = _join(current, separator)
    if chunk is not None:
        chunks.append(chunk)
    return chunks


def split_recursively(
    text: str,
    separators: list[str],
    chunk_size: int,
    chunk_overlap: int,
    *,
    is_separator_regex: bool = False,
    length_function: LengthFn = len,
    split_oversized: Callable[[str], list[str]] | None = None,
) -> list[str]:
    """
    Split with the first separator found in the text, keep pieces that fit, and
    recurse into oversized pieces with the lower-priority separators.

    Once separators run out, a piece that still does not fit goes to split_oversized
    when given, otherwise it is emitted whole. "" as the last separator splits into
    characters, so with it in the list nothing is emitted oversized.
    """
    patterns = separators if is_separator_regex else [re.escape(s) for s in separators]
    pattern = patterns[-1]
    remaining: list[str] = []
    for i, candidate in enumerate(patterns):
        if candidate == "":
            pattern = candidate
            break
        if re.search(candidate, text):
            pattern = candidate
            remaining = separators[i + 1 :]
            break

    chunks: list[str] = []
    fitting: list[str] = []
    for piece in split_on_separator(text, pattern, keep_separator=True):
        if length_function(piece) <= chunk_size:
            fitting.append(piece)
            continue
        if fitting:
            chunks.extend(merge_splits(fitting, "", chunk_size, chunk_overlap, length_function))
            fitting = []
        if remaining:
            chunks.extend(
                split_recursively(
                    piece,
                    remaining,
                    chunk_size,
                    chunk_overlap,
                    is_separator_regex=is_separator_regex,
                    length_function=length_function,
                    split_oversized=split_oversized,
                )
            )
        elif split_oversized is not None:
            chunks.extend(c for c in (s.strip() for s in split_oversized(piece)) if c)
        else:
            logger.warning(
                "Separators exhausted; emitting oversized chunk of size %d (limit %d)",
                length_function(piece),
                chunk_size,
            )
            if piece.strip():
                chunks.append(piece.strip())
    if fitting:
        chunks.extend(merge_splits(fitting, "", chunk_size, chunk_overlap, length_function))
    return chunks
