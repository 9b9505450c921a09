"""Summary statistics over chunk lengths."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SplitStatistics:
    average_chunk_size: int
    min_chunk_size: int
    max_chunk_size: int
    processing_time_ms: int

    def to_dict(self) -> dict[str, int]:
        return {
            "averageChunkSize": self.average_chunk_size,
            "minChunkSize": self.min_chunk_size,
            "maxChunkSize": self.max_chunk_size,
            "processingTime": self.processing_time_ms,
        }


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_statistics(lengths: list[int], processing_time_ms: int = 0) -> SplitStatistics:
    """Mean (rounded half up), min and max of chunk lengths. No chunks gives zeros."""
    if not lengths:
        return SplitStatistics(0, 0, 0, processing_time_ms)
    return SplitStatistics(
        average_chunk_size=_round_half_up(sum(lengths) / len(lengths)),
        min_chunk_size=min(lengths),
        max_chunk_size=max(lengths),
        processing_time_ms=processing_time_ms,
    )
