"""Sampling, counting and hashing helpers shared by the algorithms."""

from __future__ import annotations

import hashlib
import heapq
import itertools
import math
import random
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def count_runs(items: Iterable[H]) -> Iterator[tuple[H, int]]:
    """Yield ``(value, run_length)`` for each run of equal consecutive values."""
    for value, group in itertools.groupby(items):
        yield value, sum(1 for _ in group)


def get_best_count(counts: Sequence[H], rng: random.Random) -> H:
    """Return the value with the longest run, breaking ties at random."""
    best_count = 0
    ties: list[H] = []
    for value, count in count_runs(counts):
        if count > best_count:
            best_count = count
            ties = [value]
        elif count == best_count:
            ties.append(value)

    if not ties:
        raise ValueError("cannot pick the best count of an empty sequence")
    if len(ties) > 1:
        return rng.choice(ties)
    return ties[0]


class FeatureHasher:
    """Maps a (feature, hash number) pair to a signed dimension index."""

    __slots__ = ("dims",)

    def __init__(self, dims: int) -> None:
        if dims <= 0:
            raise ValueError("FeatureHasher needs a positive number of dimensions")
        self.dims = dims

    def hash(self, feature: int, hash_num: int) -> tuple[int, int]:
        """Return ``(sign, index)`` with sign in {-1, 1} and index in ``range(dims)``."""
        digest = hashlib.blake2b(
            struct.pack("<QQ", feature & 0xFFFFFFFFFFFFFFFF, hash_num & 0xFFFFFFFFFFFFFFFF),
            digest_size=8,
        ).digest()
        value = int.from_bytes(digest, "little")
        sign = value & 1
        return 2 * sign - 1, (value >> 1) % self.dims


def reservoir_sample(
    items: Iterable[tuple[int, float]], size: int, rng: random.Random
) -> list[tuple[int, float]]:
    """Uniformly sample up to ``size`` items from a stream."""
    if size <= 0:
        return []
    sample: list[tuple[int, float]] = []
    for i, item in enumerate(items):
        if i < size:
            sample.append(item)
        else:
            idx = rng.randrange(i)
            if idx < size:
                sample[idx] = item
    return sample


def _weighted_key(r: float, weight: float) -> float:
    if weight == 0.0:
        return 0.0
    exponent = 1.0 / weight
    if r == 0.0:
        return math.inf if exponent < 0 else 0.0
    return r**exponent


def weighted_reservoir_sample(
    items: Iterable[tuple[T, float]], n: int, rng: random.Random
) -> list[tuple[T, float]]:
    """Sample ``n`` ``(item, weight)`` pairs, favouring heavier weights."""
    heap: list[tuple[float, int, tuple[T, float]]] = []
    for i, (item, weight) in enumerate(items):
        key = _weighted_key(rng.random(), weight)
        heapq.heappush(heap, (key, i, (item, weight)))
        if i >= n:
            heapq.heappop(heap)
    return [entry for _, _, entry in heap]


class IllegalSample(ValueError):
    """Raised when a sample specification is negative."""


class SampleKind(Enum):
    ALL = "all"
    FIXED = "fixed"
    PROBABILITY = "probability"


@dataclass(frozen=True)
class Sample:
    """How many of ``n`` candidates to draw: all, a fixed count, or a probability."""

    kind: SampleKind
    value: float = 0.0

    @classmethod
    def from_value(cls, n: float) -> "Sample":
        """Interpret ``n`` in (0, 1) as a probability and anything else as a count."""
        if n < 0:
            raise IllegalSample(f"sample value must be non-negative, got {n}")
        if 0 < n < 1:
            return cls(SampleKind.PROBABILITY, float(n))
        return cls(SampleKind.FIXED, int(n))

    @classmethod
    def all(cls) -> "Sample":
        return cls(SampleKind.ALL)

    def sample(self, n: int, at_least_one: bool, rng: random.Random) -> tuple[int, float]:
        """Return the number of entries to draw and the dropout scale."""
        if self.kind is SampleKind.FIXED:
            r = min(int(self.value), n)
            if r == 0:
                return 0, (math.inf if n > 0 else math.nan)
            return r, n / r
        if self.kind is SampleKind.PROBABILITY:
            p = self.value
            k = sum(1 for _ in range(n) if rng.random() < p)
            if k == 0 and at_least_one:
                return 1, (1.0 - p**n) / p
            return k, 1.0 / p
        return n, 1.0