import math
import sys

import pytest

from cpubench.linpack import (
    LinpackResult,
    daxpy,
    ddot,
    dgefa,
    dgesl,
    dmxpy,
    dscal,
    epslon,
    format_report,
    idamax,
    main,
    matgen,
    residual,
    run_linpack,
)


def _columns(rows):
    return [list(col) for col in zip(*rows)]


def test_matgen_is_deterministic_and_shaped():
    a1, b1, n1 = matgen(6)
    a2, b2, n2 = matgen(6)
    assert a1 == a2 and b1 == b2 and n1 == n2
    assert len(a1) == 6 and all(len(col) == 6 for col in a1)
    assert len(b1) == 6


def test_matgen_norm_is_largest_entry():
    a, _, norma = matgen(8)
    entries = [v for col in a for v in col]
    assert norma == max(max(entries), 0.0)
    assert all(-2.0 <= v < 2.0 for v in entries)
    assert all((v * 16384.0).is_integer() for v in entries)


def test_matgen_rhs_is_row_sums():
    a, b, _ = matgen(7)
    for i, value in enumerate(b):
        assert math.isclose(value, math.fsum(col[i] for col in a), abs_tol=1e-12)


def test_matgen_rejects_empty():
    with pytest.raises(ValueError):
        matgen(0)


def test_idamax_picks_largest_magnitude():
    assert idamax([1.0, -5.0, 3.0]) == 1
    assert idamax([2.0, -2.0, 1.0]) == 0


def test_idamax_empty_raises():
    with pytest.raises(ValueError):
        idamax([])


def test_daxpy_zero_scale_and_identity():
    x = [1.5, -2.0, 3.25]
    y = [4.0, 5.0, -6.0]
    assert daxpy(0.0, x, y) == y
    assert daxpy(1.0, x, [0.0, 0.0, 0.0]) == x


def test_daxpy_length_mismatch():
    with pytest.raises(ValueError):
        daxpy(1.0, [1.0], [1.0, 2.0])


def test_ddot_values():
    assert ddot([1.0, 2.0], [3.0, 4.0]) == 11.0
    assert ddot([], []) == 0.0
    with pytest.raises(ValueError):
        ddot([1.0], [])


def test_dscal():
    x = [1.0, -2.5, 3.0]
    assert dscal(1.0, x) == x
    assert dscal(-1.0, x) == [-v for v in x]


def test_solve_generated_system_gives_ones():
    n = 12
    a, b, _ = matgen(n)
    ipvt, info = dgefa(a, n)
    assert info == 0
    assert len(ipvt) == n and ipvt[-1] == n - 1
    x = dgesl(a, n, ipvt, b, 0)
    assert all(math.isclose(v, 1.0, rel_tol=1e-9) for v in x)


def test_transpose_solve_upper_triangular():
    rows = [[2.0, 1.0, 4.0], [0.0, 3.0, 5.0], [0.0, 0.0, 6.0]]
    a = _columns(rows)
    x_true = [1.0, -2.0, 0.5]
    b = [ddot(col, x_true) for col in a]
    ipvt, info = dgefa(a, 3)
    assert info == 0
    x = dgesl(a, 3, ipvt, b, 1)
    for got, want in zip(x, x_true):
        assert math.isclose(got, want, rel_tol=1e-12, abs_tol=1e-12)


def test_dgefa_reports_zero_pivot():
    a = _columns([[1.0, 0.0], [0.0, 0.0]])
    ipvt, info = dgefa(a, 2)
    assert info == 1
    with pytest.raises(ZeroDivisionError):
        dgesl(a, 2, ipvt, [1.0, 1.0], 0)


def test_dgefa_rejects_empty():
    with pytest.raises(ValueError):
        dgefa([], 0)


def test_dmxpy_identity_and_zero():
    x = [1.0, 2.0, 3.0]
    identity = [[1.0 if i == j else 0.0 for i in range(3)] for j in range(3)]
    assert dmxpy([0.0, 0.0, 0.0], x, identity) == x
    y = [4.0, -1.0, 2.0]
    assert dmxpy(y, [0.0, 0.0, 0.0], identity) == y
    with pytest.raises(ValueError):
        dmxpy(y, [1.0], identity)


def test_epslon_matches_double_epsilon():
    assert epslon(1.0) == sys.float_info.epsilon
    assert epslon(-2.0) == 2 * sys.float_info.epsilon


def test_residual_is_small():
    residn, resid, eps, first, last = residual(20)
    assert eps == sys.float_info.epsilon
    assert 0.0 <= residn < 10.0
    assert resid >= 0.0
    assert abs(first) < 1e-10 and abs(last) < 1e-10


def test_run_linpack_structure():
    result = run_linpack(10, 2)
    assert result.n == 10 and result.ntimes == 2
    assert len(result.times) == 8
    for factor, solve, total, _, _, ratio in result.times:
        assert total == factor + solve
        assert ratio == total / 0.056
    assert result.kflops >= 0
    assert result.residn < 10.0


def test_run_linpack_rejects_bad_arguments():
    with pytest.raises(ValueError):
        run_linpack(0, 1)
    with pytest.raises(ValueError):
        run_linpack(5, 0)


def test_format_report_layout():
    row = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    result = LinpackResult(
        n=100,
        ntimes=10,
        residn=1.5,
        resid=1.0e-14,
        eps=2.0e-16,
        x_first_error=0.0,
        x_last_error=0.0,
        times=(row,) * 8,
        kflops=4,
    )
    out, err = format_report(result)
    assert out.startswith("Rolled Double Precision Linpack\n\n")
    assert "     norm. resid      resid           machep" in out
    assert "    times are reported for matrices of order   100\n" in err
    assert " times for array with leading dimension of  201\n" in err
    assert " times for array with leading dimension of 200\n" in err
    assert "       1.00       2.00       3.00          4       5.00       6.00\n" in err
    assert err.endswith("Rolled Double  Precision     4 Kflops ; 10 Reps \n")


def test_main_prints_report(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Precision Linpack" in captured.out
    assert "Kflops ; 10 Reps" in captured.err


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])