"""Integer and real matrix multiplication benchmarks."""

from __future__ import annotations

from typing import Optional, Sequence

from cpubench.common import StanfordRandom, to_float32

__all__ = ["int_matrix", "real_matrix", "multiply", "run_intmm", "run_mm"]

ROWSIZE = 40


def _entry(rng: StanfordRandom) -> int:
    temp = rng.next()
    return temp - (temp // 120) * 120 - 60


def int_matrix(rng: StanfordRandom, size: int = ROWSIZE) -> list[list[int]]:
    """Fill a square matrix row by row with values in -60..59 from ``rng``."""
    return [[_entry(rng) for _ in range(size)] for _ in range(size)]


def real_matrix(
    rng: StanfordRandom, size: int = ROWSIZE, single: bool = True
) -> list[list[float]]:
    """Fill a square matrix with the integer entries divided by three.

    With ``single`` the entries are rounded to single precision.
    """
    rounding = to_float32 if single else float
    return [[rounding(_entry(rng) / 3) for _ in range(size)] for _ in range(size)]


def multiply(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]], single: bool = False
) -> list[list[float]]:
    """Multiply two matrices by inner products, summing terms left to right.

    With ``single`` every product and partial sum is rounded to single precision.
    """
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("matrix shapes do not match for multiplication")
    columns = list(zip(*b))
    result = []
    for row in a:
        out_row = []
        for column in columns:
            acc = 0.0 if single else 0
            for x, y in zip(row, column):
                if single:
                    acc = to_float32(acc + to_float32(x * y))
                else:
                    acc = acc + x * y
            out_row.append(acc)
        result.append(out_row)
    return result


def _check_run(run: int) -> bool:
    if run < 0:
        raise ValueError("run must not be negative")
    return run < ROWSIZE


def run_intmm(run: int) -> Optional[int]:
    """Multiply two integer matrices and return diagonal element ``run``.

    Returns None when ``run`` lies beyond the matrix.
    """
    if not _check_run(run):
        return None
    rng = StanfordRandom()
    a = int_matrix(rng, ROWSIZE)
    b = int_matrix(rng, ROWSIZE)
    product = multiply(a, b)
    return product[run][run]


def run_mm(run: int, single: bool = True) -> Optional[float]:
    """Multiply two real matrices and return diagonal element ``run``.

    ``single`` selects single-precision arithmetic; otherwise double is used.
    Returns None when ``run`` lies beyond the matrix.
    """
    if not _check_run(run):
        return None
    rng = StanfordRandom()
    a = real_matrix(rng, ROWSIZE, single)
    b = real_matrix(rng, ROWSIZE, single)
    product = multiply(a, b, single)
    return product[run][run]