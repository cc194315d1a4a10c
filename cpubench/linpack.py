"""The LINPACK benchmark: solve a dense linear system by Gaussian elimination.

Matrices are held as lists of columns, so ``a[j][i]`` is row ``i`` of column ``j``.
All arithmetic is in double precision.
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence

__all__ = [
    "LinpackResult",
    "matgen",
    "idamax",
    "daxpy",
    "ddot",
    "dscal",
    "dgefa",
    "dgesl",
    "dmxpy",
    "epslon",
    "residual",
    "run_linpack",
    "format_report",
    "main",
]

ORDER = 100
NTIMES = 10
CRAY = 0.056
LDA = 201
LDAA = 200
BANNER = "Rolled Double "

Row = tuple[float, float, float, float, float, float]


@dataclass(frozen=True)
class LinpackResult:
    """Residual check and timings of one benchmark run.

    ``times`` holds eight rows of (dgefa, dgesl, total, kflops, unit, ratio).
    """

    n: int
    ntimes: int
    residn: float
    resid: float
    eps: float
    x_first_error: float
    x_last_error: float
    times: tuple[Row, ...]
    kflops: int


def matgen(n: int) -> tuple[list[list[float]], list[float], float]:
    """Generate the test matrix, its row sums and the largest entry.

    Returns the matrix as ``n`` columns, the right-hand side whose solution
    is all ones, and the largest entry (never below zero).
    """
    if n < 1:
        raise ValueError("matrix order must be at least 1")
    init = 1325
    norma = 0.0
    a: list[list[float]] = []
    for _ in range(n):
        column = []
        for _ in range(n):
            init = 3125 * init % 65536
            value = (init - 32768.0) / 16384.0
            column.append(value)
            if value > norma:
                norma = value
        a.append(column)
    b = [0.0] * n
    for column in a:
        b = [acc + value for acc, value in zip(b, column)]
    return a, b, norma


def idamax(values: Sequence[float]) -> int:
    """Index of the first element with the largest absolute value."""
    if not values:
        raise ValueError("idamax of an empty sequence")
    best = 0
    largest = abs(values[0])
    for index, value in enumerate(values):
        if abs(value) > largest:
            best = index
            largest = abs(value)
    return best


def _check_lengths(x: Sequence[float], y: Sequence[float]) -> None:
    if len(x) != len(y):
        raise ValueError("vectors must have the same length")


def daxpy(da: float, x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Return ``y + da * x``."""
    _check_lengths(x, y)
    if da == 0.0:
        return list(y)
    return [yi + da * xi for xi, yi in zip(x, y)]


def ddot(x: Sequence[float], y: Sequence[float]) -> float:
    """Dot product, summed left to right."""
    _check_lengths(x, y)
    total = 0.0
    for xi, yi in zip(x, y):
        total = total + xi * yi
    return total


def dscal(da: float, x: Sequence[float]) -> list[float]:
    """Return ``da * x``."""
    return [da * xi for xi in x]


def dgefa(a: Sequence[MutableSequence[float]], n: int) -> tuple[list[int], int]:
    """Factor the matrix in place by Gaussian elimination with partial pivoting.

    Returns the pivot indices and ``info``: 0 normally, otherwise the index
    of a zero pivot, which means that ``dgesl`` would divide by zero.
    """
    if n < 1:
        raise ValueError("matrix order must be at least 1")
    info = 0
    ipvt = [0] * n
    for k in range(n - 1):
        column = a[k]
        pivot = idamax(column[k:n]) + k
        ipvt[k] = pivot
        if column[pivot] == 0.0:
            info = k
            continue
        if pivot != k:
            column[pivot], column[k] = column[k], column[pivot]
        column[k + 1 : n] = dscal(-1.0 / column[k], column[k + 1 : n])
        multipliers = column[k + 1 : n]
        for other in a[k + 1 : n]:
            t = other[pivot]
            if pivot != k:
                other[pivot] = other[k]
                other[k] = t
            other[k + 1 : n] = daxpy(t, multipliers, other[k + 1 : n])
    ipvt[n - 1] = n - 1
    if a[n - 1][n - 1] == 0.0:
        info = n - 1
    return ipvt, info


def dgesl(
    a: Sequence[Sequence[float]],
    n: int,
    ipvt: Sequence[int],
    b: Sequence[float],
    job: int = 0,
) -> list[float]:
    """Solve ``a * x = b`` (job 0) or ``trans(a) * x = b`` with factors from dgefa.

    Raises ZeroDivisionError if the factor has a zero on its diagonal.
    """
    x = list(b)
    if job == 0:
        for k in range(n - 1):
            pivot = ipvt[k]
            t = x[pivot]
            if pivot != k:
                x[pivot] = x[k]
                x[k] = t
            x[k + 1 : n] = daxpy(t, a[k][k + 1 : n], x[k + 1 : n])
        for k in reversed(range(n)):
            x[k] = x[k] / a[k][k]
            x[:k] = daxpy(-x[k], a[k][:k], x[:k])
    else:
        for k in range(n):
            t = ddot(a[k][:k], x[:k])
            x[k] = (x[k] - t) / a[k][k]
        for k in range(n - 2, 0, -1):
            x[k] = x[k] + ddot(a[k][k + 1 : n], x[k + 1 : n])
            pivot = ipvt[k]
            if pivot != k:
                x[pivot], x[k] = x[k], x[pivot]
    return x


def dmxpy(
    y: Sequence[float], x: Sequence[float], m: Sequence[Sequence[float]]
) -> list[float]:
    """Return ``y + m * x``, adding the columns of ``m`` in order."""
    if len(x) != len(m):
        raise ValueError("vector length must match the number of columns")
    rows = len(y)
    result = list(y)
    for xj, column in zip(x, m):
        result = [r + xj * c for r, c in zip(result, column[:rows])]
    return result


def epslon(x: float) -> float:
    """Estimate the unit roundoff for quantities of size ``x``."""
    a = 4.0 / 3.0
    eps = 0.0
    while eps == 0.0:
        b = a - 1.0
        c = b + b + b
        eps = abs(c - 1.0)
    return eps * abs(x)


def residual(n: int) -> tuple[float, float, float, float, float]:
    """Solve the test system and measure the error of the solution.

    Returns the normalised residual, the residual, the machine epsilon and
    the errors of the first and last solution components.
    """
    a, b, norma = matgen(n)
    ipvt, _ = dgefa(a, n)
    x = dgesl(a, n, ipvt, b, 0)
    a, b, norma = matgen(n)
    r = dmxpy([-value for value in b], x, a)
    resid = max(abs(value) for value in r)
    normx = max(abs(value) for value in x)
    eps = epslon(1.0)
    residn = resid / (n * norma * normx * eps)
    return residn, resid, eps, x[0] - 1, x[-1] - 1


def _row(factor: float, solve: float, ops: float) -> Row:
    total = factor + solve
    kflops = ops / (1.0e3 * total) if total > 0 else math.inf
    unit = 2.0e3 / kflops
    return (factor, solve, total, kflops, unit, total / CRAY)


def _single_run(n: int, ops: float) -> Row:
    a, b, _ = matgen(n)
    start = time.process_time()
    ipvt, _ = dgefa(a, n)
    factor = time.process_time() - start
    start = time.process_time()
    dgesl(a, n, ipvt, b, 0)
    solve = time.process_time() - start
    return _row(factor, solve, ops)


def _averaged_run(n: int, ntimes: int, ops: float) -> Row:
    generation = 0.0
    start = time.process_time()
    for _ in range(ntimes):
        mark = time.process_time()
        a, b, _ = matgen(n)
        generation += time.process_time() - mark
        ipvt, _ = dgefa(a, n)
    factor = (time.process_time() - start - generation) / ntimes
    start = time.process_time()
    for _ in range(ntimes):
        dgesl(a, n, ipvt, b, 0)
    solve = (time.process_time() - start) / ntimes
    return _row(factor, solve, ops)


def _nint(value: float) -> int:
    if not math.isfinite(value):
        return 0
    value = value + 0.5 if value > 0 else value - 0.5
    if abs(value) < 1.0:
        return 0
    magnitude = math.floor(abs(value))
    return -magnitude if value < 0 else magnitude


def run_linpack(n: int = ORDER, ntimes: int = NTIMES) -> LinpackResult:
    """Run the residual check and the eight timed solves of order ``n``."""
    if n < 1:
        raise ValueError("matrix order must be at least 1")
    if ntimes < 1:
        raise ValueError("number of repetitions must be at least 1")
    ops = (2.0e0 * (n * n * n)) / 3.0 + 2.0 * (n * n)
    residn, resid, eps, first, last = residual(n)
    rows: list[Row] = []
    for _ in range(2):
        rows.extend(_single_run(n, ops) for _ in range(3))
        rows.append(_averaged_run(n, ntimes, ops))
    kflops = _nint(min(rows[3][3], rows[7][3]))
    return LinpackResult(
        n=n,
        ntimes=ntimes,
        residn=residn,
        resid=resid,
        eps=eps,
        x_first_error=first,
        x_last_error=last,
        times=tuple(rows),
        kflops=kflops,
    )


def _format_row(row: Row) -> str:
    return "%11.2f%11.2f%11.2f%11.0f%11.2f%11.2f\n" % row


def format_report(result: LinpackResult) -> tuple[str, str]:
    """Return the report as (standard output text, standard error text)."""
    out = [
        BANNER + "Precision Linpack\n\n",
        "     norm. resid      resid           machep",
        "         x[0]-1        x[n-1]-1\n",
        "  %8.1f      %16.8e%16.8e%16.8e%16.8e\n"
        % (
            result.residn,
            result.resid,
            result.eps,
            result.x_first_error,
            result.x_last_error,
        ),
    ]
    err = [
        BANNER + "Precision Linpack\n\n",
        "    times are reported for matrices of order %5d\n" % result.n,
        "      dgefa      dgesl      total       kflops     unit",
        "      ratio\n",
        " times for array with leading dimension of%5d\n" % LDA,
    ]
    err.extend(_format_row(row) for row in result.times[:4])
    err.append(" times for array with leading dimension of%4d\n" % LDAA)
    err.extend(_format_row(row) for row in result.times[4:])
    err.append(BANNER)
    err.append(" Precision %5d Kflops ; %d Reps \n" % (result.kflops, result.ntimes))
    return "".join(out), "".join(err)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark and print its report."""
    parser = argparse.ArgumentParser(
        prog="linpack", description="Double precision LINPACK benchmark."
    )
    parser.parse_args(argv)
    result = run_linpack(ORDER, NTIMES)
    out, err = format_report(result)
    sys.stdout.write(out)
    sys.stdout.flush()
    sys.stderr.write(err)
    sys.stderr.flush()
    return 0