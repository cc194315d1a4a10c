"""Command line entry point for the Stanford benchmark suite."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Iterator, Optional, Sequence

from cpubench.common import BenchmarkError
from cpubench.fft import run_oscar
from cpubench.matrix import run_intmm, run_mm
from cpubench.puzzle import run_puzzle
from cpubench.recursion import run_perm, run_queens, run_towers
from cpubench.sorting import run_bubble, run_quick, run_tree

__all__ = ["run_benchmark", "main"]

_Runner = Callable[[int], Iterable[str]]


def _single(value: object) -> list[str]:
    return [str(value)]


def _real(value: Optional[float]) -> list[str]:
    return [] if value is None else ["%f" % value]


def _intmm(run: int) -> list[str]:
    value = run_intmm(run)
    return [] if value is None else [str(value)]


def _puzzle(_run: int) -> list[str]:
    first_free, trials = run_puzzle()
    return [str(first_free), str(trials)]


def _oscar(_run: int) -> list[str]:
    return run_oscar().splitlines()


# Name -> (number of repetitions, function producing the output lines of one run).
_BENCHMARKS: dict[str, tuple[int, _Runner]] = {
    "bubblesort": (100, lambda run: _single(run_bubble(run))),
    "quicksort": (100, lambda run: _single(run_quick(run))),
    "treesort": (100, lambda run: _single(run_tree(run))),
    "perm": (100, lambda _run: _single(run_perm())),
    "towers": (100, lambda _run: _single(run_towers())),
    "queens": (100, lambda run: _single(run_queens(run))),
    "intmm": (10, _intmm),
    "floatmm": (5000, lambda run: _real(run_mm(run, True))),
    "realmm": (10, lambda run: _real(run_mm(run, False))),
    "puzzle": (100, _puzzle),
    "oscar": (10, _oscar),
}


def _lines(repeats: int, runner: _Runner) -> Iterator[str]:
    for run in range(repeats):
        yield from runner(run)


def run_benchmark(name: str) -> Iterator[str]:
    """Return a lazy iterator over the output lines of the named benchmark.

    Raises ValueError for an unknown name; iterating raises BenchmarkError
    when the benchmark detects a wrong result.
    """
    try:
        repeats, runner = _BENCHMARKS[name]
    except KeyError:
        known = ", ".join(sorted(_BENCHMARKS))
        raise ValueError(f"unknown benchmark {name!r}; choose one of: {known}") from None
    return _lines(repeats, runner)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one benchmark and print its output lines."""
    parser = argparse.ArgumentParser(
        prog="cpubench", description="Run one of the Stanford CPU benchmarks."
    )
    parser.add_argument("benchmark", choices=sorted(_BENCHMARKS))
    args = parser.parse_args(argv)
    try:
        for line in run_benchmark(args.benchmark):
            sys.stdout.write(line + "\n")
    except BenchmarkError as exc:
        sys.stdout.flush()
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.flush()
    return 0