"""Recursive benchmarks: permutations, Towers of Hanoi and eight queens."""

from __future__ import annotations

from cpubench.common import BenchmarkError

__all__ = [
    "Towers",
    "permutation_count",
    "run_perm",
    "run_towers",
    "solve_queens",
    "run_queens",
]

MAX_CELLS = 18
TOWER_DISCS = 14
EXPECTED_PERMUTATIONS = 43300
EXPECTED_MOVES = 16383
QUEENS_REPEATS = 50


def permutation_count(n: int = 7, repeats: int = 5) -> int:
    """Permute ``n`` elements recursively ``repeats`` times; return the call count."""
    calls = 0

    def permute(items: list[int], k: int) -> None:
        nonlocal calls
        calls += 1
        if k != 1:
            permute(items, k - 1)
            for other in range(k - 1, 0, -1):
                items[k], items[other] = items[other], items[k]
                permute(items, k - 1)
                items[k], items[other] = items[other], items[k]

    for _ in range(repeats):
        items = [0] + list(range(n))
        permute(items, n)
    return calls


def run_perm() -> int:
    """Run the permutation benchmark once and return the call count."""
    count = permutation_count(7, 5)
    if count != EXPECTED_PERMUTATIONS:
        raise BenchmarkError("Error in Perm.")
    return count


class Towers:
    """Towers of Hanoi on three stacks, built from a fixed pool of list cells."""

    def __init__(self, cells: int = MAX_CELLS) -> None:
        self.cells = cells
        self.moves_done = 0
        self._reset()

    def _reset(self) -> None:
        self._disc = [0] * (self.cells + 1)
        self._next = [max(i - 1, 0) for i in range(self.cells + 1)]
        self._free = self.cells
        self._tops = [0, 0, 0, 0]

    def _take_cell(self) -> int:
        if self._free <= 0:
            raise BenchmarkError("Error in Towers: out of space")
        cell = self._free
        self._free = self._next[cell]
        return cell

    def push(self, disc: int, stack: int) -> None:
        """Put a disc on a stack; it must be smaller than the disc below."""
        top = self._tops[stack]
        if top > 0 and self._disc[top] <= disc:
            raise BenchmarkError("Error in Towers: disc size error")
        cell = self._take_cell()
        self._next[cell] = top
        self._tops[stack] = cell
        self._disc[cell] = disc

    def pop(self, stack: int) -> int:
        """Take the top disc off a stack and return its size."""
        top = self._tops[stack]
        if top <= 0:
            raise BenchmarkError("Error in Towers: nothing to pop")
        disc = self._disc[top]
        below = self._next[top]
        self._next[top] = self._free
        self._free = top
        self._tops[stack] = below
        return disc

    def move(self, source: int, target: int) -> None:
        """Move the top disc from one stack to another."""
        self.push(self.pop(source), target)
        self.moves_done += 1

    def _tower(self, source: int, target: int, count: int) -> None:
        if count == 1:
            self.move(source, target)
            return
        other = 6 - source - target
        self._tower(source, other, count - 1)
        self.move(source, target)
        self._tower(other, target, count - 1)

    def solve(self, discs: int = TOWER_DISCS) -> int:
        """Stack ``discs`` discs on stack 1, move them to stack 2; return the moves."""
        self._reset()
        for disc in range(discs, 0, -1):
            self.push(disc, 1)
        self.moves_done = 0
        self._tower(1, 2, discs)
        return self.moves_done


def run_towers() -> int:
    """Run the Towers of Hanoi benchmark once and return the number of moves."""
    moves = Towers(MAX_CELLS).solve(TOWER_DISCS)
    if moves != EXPECTED_MOVES:
        raise BenchmarkError("Error in Towers.")
    return moves


def solve_queens() -> tuple[int, ...]:
    """Find the first eight-queens placement; return the column for rows 1 to 8."""
    columns_free = [True] * 9
    sums_free = [True] * 17
    diffs_free = [True] * 15
    placement = [0] * 9

    def place(row: int) -> bool:
        for col in range(1, 9):
            if columns_free[col] and sums_free[row + col] and diffs_free[row - col + 7]:
                placement[row] = col
                columns_free[col] = sums_free[row + col] = diffs_free[row - col + 7] = False
                if row == 8 or place(row + 1):
                    return True
                columns_free[col] = sums_free[row + col] = diffs_free[row - col + 7] = True
        return False

    if not place(1):
        raise BenchmarkError("Error in Queens.")
    return tuple(placement[1:])


def run_queens(run: int) -> int:
    """Solve eight queens fifty times and return ``run + 1``."""
    for _ in range(QUEENS_REPEATS):
        solve_queens()
    return run + 1