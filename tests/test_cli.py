from itertools import islice

import pytest

from cpubench.cli import main, run_benchmark
from cpubench.matrix import run_intmm, run_mm
from cpubench.puzzle import run_puzzle
from cpubench.sorting import run_bubble


def test_perm_lines_report_call_count():
    assert list(islice(run_benchmark("perm"), 2)) == ["43300", "43300"]


def test_towers_reports_moves():
    assert next(run_benchmark("towers")) == "16383"


def test_queens_counts_runs():
    assert list(islice(run_benchmark("queens"), 3)) == ["1", "2", "3"]


def test_puzzle_prints_position_and_trials():
    first_free, _ = run_puzzle()
    assert list(islice(run_benchmark("puzzle"), 2)) == [str(first_free), "2005"]


def test_bubblesort_lines_follow_sorted_order():
    lines = list(islice(run_benchmark("bubblesort"), 3))
    assert lines[0] == str(run_bubble(0))
    values = [int(line) for line in lines]
    assert values == sorted(values)


def test_quicksort_lines_follow_sorted_order():
    values = [int(line) for line in islice(run_benchmark("quicksort"), 3)]
    assert values == sorted(values)


def test_intmm_prints_ten_diagonal_entries():
    lines = list(run_benchmark("intmm"))
    assert len(lines) == 10
    assert lines[0] == str(run_intmm(0))
    assert lines[9] == str(run_intmm(9))


def test_floatmm_formats_with_six_decimals():
    first = next(run_benchmark("floatmm"))
    assert first == "%f" % run_mm(0, True)
    assert len(first.split(".")[1]) == 6


def test_unknown_benchmark_raises():
    with pytest.raises(ValueError):
        run_benchmark("nosuch")


def test_main_runs_perm(capsys):
    assert main(["perm"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 100
    assert set(lines) == {"43300"}


def test_main_rejects_unknown_name():
    with pytest.raises(SystemExit) as excinfo:
        main(["nosuch"])
    assert excinfo.value.code == 2