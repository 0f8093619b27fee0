"""Distance metrics where zero means a perfect match."""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence


class Distance(Enum):
    """Supported distance metrics."""

    ALT = "alt"
    """Landmark triangulation: the largest absolute coordinate difference."""
    COSINE = "cosine"
    DOT = "dot"
    """Negated dot product, so lower means closer."""
    EUCLIDEAN = "euclidean"
    HAMMING = "hamming"
    JACCARD = "jaccard"
    """Treats each float as a sorted set identifier; a negative value ends the set."""

    def compute(self, e1: Sequence[float], e2: Sequence[float]) -> float:
        """Distance between two vectors under this metric."""
        return _METRICS[self](e1, e2)


def _alt(e1: Sequence[float], e2: Sequence[float]) -> float:
    return max((abs(a - b) for a, b in zip(e1, e2)), default=0.0)


def _cosine(e1: Sequence[float], e2: Sequence[float]) -> float:
    dot = n1 = n2 = 0.0
    for a, b in zip(e1, e2):
        dot += a * b
        n1 += a * a
        n2 += b * b
    denom = math.sqrt(n1) * math.sqrt(n2)
    if denom == 0.0:
        return math.inf
    score = dot / denom
    if math.isnan(score):
        return math.inf
    return 1.0 - score


def _dot(e1: Sequence[float], e2: Sequence[float]) -> float:
    return -sum(a * b for a, b in zip(e1, e2))


def _euclidean(e1: Sequence[float], e2: Sequence[float]) -> float:
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(e1, e2)))


def _hamming(e1: Sequence[float], e2: Sequence[float]) -> float:
    if not e1:
        return math.nan
    mismatches = sum(1 for a, b in zip(e1, e2) if a != b)
    return mismatches / len(e1)


def _set_length(values: Sequence[float], start: int) -> int:
    idx = start
    while idx < len(values) and values[idx] >= 0.0:
        idx += 1
    return idx


def _jaccard(e1: Sequence[float], e2: Sequence[float]) -> float:
    i = j = matches = 0
    while i < len(e1) and j < len(e2) and e1[i] >= 0.0 and e2[j] >= 0.0:
        v1, v2 = e1[i], e2[j]
        if v1 == v2:
            matches += 1
            i += 1
            j += 1
        elif v1 < v2:
            i += 1
        else:
            j += 1
    i = _set_length(e1, i)
    j = _set_length(e2, j)
    total = matches + (i - matches) + (j - matches)
    if total == 0:
        return math.nan
    return 1.0 - matches / total


_METRICS = {
    Distance.ALT: _alt,
    Distance.COSINE: _cosine,
    Distance.DOT: _dot,
    Distance.EUCLIDEAN: _euclidean,
    Distance.HAMMING: _hamming,
    Distance.JACCARD: _jaccard,
}