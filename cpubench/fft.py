"""The Oscar benchmark: a single-precision fast Fourier transform."""

from __future__ import annotations

from typing import Sequence

from cpubench.common import to_float32 as _f

__all__ = ["cos_series", "uniform11", "exptab", "fft", "format_complex", "run_oscar"]

FFT_SIZE = 256
OSCAR_SEED = 5767
OSCAR_PASSES = 20
OSCAR_SQRINV = 0.0625

Complex = tuple[float, float]


def cos_series(x: float) -> float:
    """Cosine of ``x`` radians by a series expansion in single precision."""
    x = _f(x)
    result = 1.0
    factor = 1
    power = x
    for i in range(2, 11):
        factor *= i
        power = _f(power * x)
        if i % 2 == 0:
            term = _f(power / factor)
            if i % 4 == 0:
                result = _f(result + term)
            else:
                result = _f(result - term)
    return result


def uniform11(iy: int) -> tuple[int, float]:
    """Advance the 13-bit generator; return the new state and a value in [0, 1)."""
    iy = (4855 * iy + 1731) & 8191
    return iy, _f(iy / 8192.0)


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def exptab(n: int) -> list[Complex]:
    """Table of the ``n // 2 + 1`` twiddle factors exp(i*pi*k/(n/2))."""
    if n < 8 or not _is_power_of_two(n):
        raise ValueError("table size must be a power of two of at least 8")
    theta = _f(3.1415926536)
    divisor = 4.0
    halves = []
    for _ in range(25):
        halves.append(_f(1.0 / _f(2 * cos_series(_f(theta / divisor)))))
        divisor += divisor

    m = n // 2
    l = m // 2
    e: list[Complex] = [(0.0, 0.0)] * (m + 1)
    e[0] = (1.0, 0.0)
    e[l] = (0.0, 1.0)
    e[m] = (-1.0, 0.0)
    j = 0
    while True:
        i = l // 2
        k = i
        h = halves[j]
        while True:
            ar, ai = e[k + i]
            br, bi = e[k - i]
            e[k] = (_f(h * _f(ar + br)), _f(h * _f(ai + bi)))
            k += l
            if k > m:
                break
        j = min(j + 1, 24)
        l = i
        if l <= 1:
            break
    return e


def fft(z: Sequence[Complex], e: Sequence[Complex], sqrinv: float) -> list[Complex]:
    """Transform ``z`` with twiddle table ``e``, scale by ``sqrinv`` and conjugate."""
    n = len(z)
    if n < 2 or not _is_power_of_two(n):
        raise ValueError("transform length must be a power of two")
    m = n // 2
    if len(e) < m:
        raise ValueError("twiddle table is too short for this transform")
    scale = _f(sqrinv)
    current = [(float(r), float(i)) for r, i in z]
    work: list[Complex] = [(0.0, 0.0)] * n
    l = 1
    while l <= m:
        k, j, i = 0, l, 0
        while j <= m:
            er, ei = e[k]
            while i < j:
                ar, ai = current[i]
                br, bi = current[i + m]
                work[i + k] = (_f(ar + br), _f(ai + bi))
                dr = _f(ar - br)
                di = _f(ai - bi)
                work[i + j] = (
                    _f(_f(er * dr) - _f(ei * di)),
                    _f(_f(er * di) + _f(ei * dr)),
                )
                i += 1
            k = j
            j = k + l
        current = list(work)
        l += l
    return [(_f(scale * r), _f(-scale * im)) for r, im in current]


def format_complex(
    z: Sequence[Complex], start: int, finish: int, increment: int
) -> str:
    """Format every ``increment``-th value from ``start``, two per line."""
    if increment <= 0:
        raise ValueError("increment must be positive")
    lines = []
    i = start
    while True:
        pair = []
        for _ in range(2):
            r, im = z[i]
            pair.append(f"  {r:15.3f}{im:15.3f}")
            i += increment
        lines.append("".join(pair))
        if i > finish:
            break
    return "\n" + "".join(line + "\n" for line in lines)


def run_oscar() -> str:
    """Run twenty transforms of pseudo-random data and return the sampled output."""
    e = exptab(FFT_SIZE)
    iy = OSCAR_SEED
    z: list[Complex] = []
    for _ in range(FFT_SIZE):
        iy, zr = uniform11(iy)
        iy, zi = uniform11(iy)
        z.append((_f(_f(20.0 * zr) - 10.0), _f(_f(20.0 * zi) - 10.0)))
    for _ in range(OSCAR_PASSES):
        z = fft(z, e, OSCAR_SQRINV)
    return format_complex(z, 0, FFT_SIZE - 1, 17)