import pytest

from cpubench.common import StanfordRandom, to_float32
from cpubench.matrix import int_matrix, multiply, real_matrix, run_intmm, run_mm


def test_int_matrix_shape_and_range():
    m = int_matrix(StanfordRandom(), 40)
    assert len(m) == 40
    assert all(len(row) == 40 for row in m)
    assert all(-60 <= v < 60 for row in m for v in row)


def test_int_matrix_is_deterministic():
    rng = StanfordRandom()
    first = int_matrix(rng, 6)
    rng.reset()
    assert int_matrix(rng, 6) == first
    assert int_matrix(StanfordRandom(), 6) == first


def test_real_matrix_is_int_matrix_over_three():
    ints = int_matrix(StanfordRandom(), 8)
    reals = real_matrix(StanfordRandom(), 8, False)
    for int_row, real_row in zip(ints, reals):
        for i, r in zip(int_row, real_row):
            assert r * 3 == pytest.approx(i)


def test_single_real_matrix_holds_float32_values():
    reals = real_matrix(StanfordRandom(), 8, True)
    assert all(to_float32(v) == v for row in reals for v in row)


def test_multiply_small_example():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_by_identity():
    m = int_matrix(StanfordRandom(), 5)
    identity = [[1 if i == j else 0 for j in range(5)] for i in range(5)]
    assert multiply(m, identity) == m
    assert multiply(identity, m) == m


def test_multiply_shape_mismatch_raises():
    with pytest.raises(ValueError):
        multiply([[1, 2, 3]], [[1], [2]])


def test_run_intmm_is_diagonal_of_product():
    rng = StanfordRandom()
    a = int_matrix(rng, 40)
    b = int_matrix(rng, 40)
    product = multiply(a, b)
    assert run_intmm(3) == product[3][3]


@pytest.mark.parametrize("run", [0, 1, 9])
def test_double_mm_is_intmm_over_nine(run):
    assert run_mm(run, False) == pytest.approx(run_intmm(run) / 9, rel=1e-9)


@pytest.mark.parametrize("run", [0, 5])
def test_single_mm_close_to_double(run):
    assert run_mm(run, True) == pytest.approx(run_mm(run, False), rel=1e-4, abs=1e-3)


def test_runs_beyond_matrix_return_none():
    assert run_intmm(40) is None
    assert run_mm(40, True) is None


def test_negative_run_raises():
    with pytest.raises(ValueError):
        run_intmm(-1)
    with pytest.raises(ValueError):
        run_mm(-1, False)