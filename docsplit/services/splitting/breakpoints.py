"""
Breakpoint detection for the semantic chunker.

Each strategy turns the sequence of adjacent-sentence similarities into the set
of sentence indices after which a chunk should end. Percentiles are looked up as
sorted[floor(fraction * len)] with no interpolation, so results stay identical
to chunks produced earlier with the same inputs.
"""

import math
from typing import Callable

from docsplit.config.splitting.models import BreakpointStrategy

PERCENTILE_FRACTION = 0.25
STD_DEV_MULTIPLIER = 1.0
IQR_LOWER_FRACTION = 0.25
IQR_UPPER_FRACTION = 0.75
IQR_MULTIPLIER = 1.5
GRADIENT_FRACTION = 0.95


def _index_percentile(values: list[float], fraction: float) -> float:
    ordered = sorted(values)
    return ordered[math.floor(fraction * len(ordered))]


def _below(values: list[float], threshold: float) -> set[int]:
    return {i for i, v in enumerate(values) if v < threshold}


def _percentile(similarities: list[float]) -> set[int]:
    threshold = _index_percentile(similarities, PERCENTILE_FRACTION)
    return _below(similarities, threshold)


def _standard_deviation(similarities: list[float]) -> set[int]:
    mean = sum(similarities) / len(similarities)
    # Population standard deviation
    std = math.sqrt(sum((s - mean) ** 2 for s in similarities) / len(similarities))
    return _below(similarities, mean - STD_DEV_MULTIPLIER * std)


def _interquartile(similarities: list[float]) -> set[int]:
    q1 = _index_percentile(similarities, IQR_LOWER_FRACTION)
    q3 = _index_percentile(similarities, IQR_UPPER_FRACTION)
    return _below(similarities, q1 - IQR_MULTIPLIER * (q3 - q1))


def _gradient(similarities: list[float]) -> set[int]:
    gradients = [abs(similarities[i + 1] - similarities[i]) for i in range(len(similarities) - 1)]
    if not gradients:
        return set()
    threshold = _index_percentile(gradients, GRADIENT_FRACTION)
    return {i for i, g in enumerate(gradients) if g > threshold}


_DETECTORS: dict[BreakpointStrategy, Callable[[list[float]], set[int]]] = {
    BreakpointStrategy.PERCENTILE: _percentile,
    BreakpointStrategy.STANDARD_DEVIATION: _standard_deviation,
    BreakpointStrategy.INTERQUARTILE: _interquartile,
    BreakpointStrategy.GRADIENT: _gradient,
}


def detect_breakpoints(similarities: list[float], strategy: BreakpointStrategy) -> set[int]:
    """
    Return indices i meaning "end a chunk after sentence i".
    Pure function of its inputs. An empty similarity list (one sentence) yields no breakpoints.
    """
    if not similarities:
        return set()
    return _DETECTORS[BreakpointStrategy(strategy)](similarities)
