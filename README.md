# cpubench

Classic CPU benchmarks in pure Python:

- the Stanford small-program suite: bubble sort, quicksort, tree sort,
  permutations, Towers of Hanoi, eight queens, integer and real matrix
  multiplication, Baskett's packing puzzle and a single-precision FFT
  ("Oscar");
- Linpack, solving a dense 100×100 system by Gaussian elimination with
  partial pivoting in double precision;
- Dhrystone 2.1, the synthetic integer benchmark.

The benchmarks check their own results (for example 43300 permutation
calls, 16383 tower moves, 2005 puzzle trials) and raise
`cpubench.common.BenchmarkError` when a check fails.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

`cpubench` runs one Stanford benchmark by name and prints its output lines.
The names are `bubblesort`, `quicksort`, `treesort`, `perm`, `towers`,
`queens`, `intmm`, `floatmm`, `realmm`, `puzzle` and `oscar`:

```
cpubench perm
cpubench towers
cpubench oscar
```

It exits with status 1 and prints the message to standard error if a
benchmark's self-check fails.

`cpubench-linpack` runs Linpack of order 100 with 10 repetitions. The
residual check goes to standard output, the timing table and the Kflops
figure to standard error:

```
cpubench-linpack
```

`cpubench-dhrystone` runs Dhrystone for the given number of passes and
prints the final values of its variables with the expected values, then the
microseconds per run and Dhrystones per second:

```
cpubench-dhrystone 100000
```

Without an argument it asks for the number of runs on standard input. If
the run took under 1.2 seconds of user time it reports that the time was too
small instead of giving figures.

## Library use

```python
from cpubench.sorting import quicksort, bubble_sort
from cpubench.recursion import permutation_count, solve_queens, Towers
from cpubench.puzzle import run_puzzle

print(quicksort([5, 3, 9, 1]))      # [1, 3, 5, 9]
print(permutation_count(7, 5))      # 43300
print(solve_queens())               # column of the queen in rows 1 to 8
print(Towers().solve(14))           # 16383
print(run_puzzle())                 # (first free cell, number of trials)
```

Linpack returns a `LinpackResult`; `format_report` gives the text for
standard output and standard error as a pair:

```python
from cpubench.linpack import run_linpack, format_report

result = run_linpack(100, 10)
out, err = format_report(result)
print(out)
print(err)
print(result.kflops)
```

Dhrystone returns a `DhrystoneResult` holding the final state and timing:

```python
from cpubench.dhrystone_run import run_dhrystone, format_report

result = run_dhrystone(50000)
print(format_report(result))
```

The lower-level pieces are public too: `cpubench.common.StanfordRandom`
(the 16-bit generator), `cpubench.matrix.multiply`,
`cpubench.fft.exptab` and `cpubench.fft.fft`, and the Linpack kernels
`matgen`, `dgefa`, `dgesl`, `daxpy`, `ddot`, `dscal`, `idamax`, `dmxpy`
and `epslon` in `cpubench.linpack`.

## Limitations

- Timings measure the Python interpreter, so they are not comparable with
  figures from compiled benchmark programs.
- Linpack runs in double precision only; there is no single-precision mode.
- Matrix order and repetition count of `cpubench-linpack` are fixed at 100
  and 10; use `run_linpack` to choose others.
- There is no parallel or multi-context mode: every benchmark runs in a
  single thread.