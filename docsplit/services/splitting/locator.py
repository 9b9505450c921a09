"""
Chunk locator: maps each chunk back to offsets in the original text.

Chunks are searched for in order, each at or after the end of the previous one.
When a chunk's text does not occur verbatim (the semantic chunker re-punctuates
sentences), its start falls back to the end of the previous chunk. That fallback
is an approximation: the offsets then describe where the chunk would sit, not an
exact slice of the source.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkSpan:
    start_index: int
    end_index: int


def locate_chunks(chunks: list[str], original_text: str) -> list[ChunkSpan]:
    spans: list[ChunkSpan] = []
    cursor = 0
    for chunk in chunks:
        start = original_text.find(chunk, cursor)
        if start == -1:
            start = cursor
        end = start + len(chunk)
        spans.append(ChunkSpan(start_index=start, end_index=end))
        cursor = end
    return spans
