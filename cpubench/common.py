"""Shared pieces of the Stanford benchmark suite: the random generator and helpers."""

from __future__ import annotations

import struct

__all__ = ["BenchmarkError", "StanfordRandom", "to_float32", "make_sort_list"]

DEFAULT_SEED = 74755


class BenchmarkError(Exception):
    """Raised when a benchmark detects a wrong result or an invalid operation."""


class StanfordRandom:
    """The 16-bit linear congruential generator used by the Stanford benchmarks."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = seed
        self.state = seed

    def reset(self) -> None:
        """Return the generator to its initial seed."""
        self.state = self.seed

    def next(self) -> int:
        """Advance the generator and return the new value in 0..65535."""
        self.state = (self.state * 1309 + 13849) & 65535
        return self.state

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()


def to_float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    return struct.unpack("f", struct.pack("f", value))[0]


def make_sort_list(count: int) -> tuple[list[int], int, int]:
    """Build the benchmark's pseudo-random list to sort.

    Returns the values together with the largest and smallest of them,
    where both extremes start out at zero as in the benchmark.
    """
    rng = StanfordRandom()
    values: list[int] = []
    biggest = littlest = 0
    for _ in range(count):
        temp = rng.next()
        value = temp - (temp // 100000) * 100000 - 50000
        values.append(value)
        if value > biggest:
            biggest = value
        elif value < littlest:
            littlest = value
    return values, biggest, littlest