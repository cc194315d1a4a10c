"""Forest Baskett's packing puzzle: fill a 5x5x5 box with pieces by backtracking."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product

from cpubench.common import BenchmarkError

__all__ = ["Puzzle", "run_puzzle"]

SIZE = 511
D = 8
EXPECTED_TRIALS = 2005

# (x extent, y extent, z extent, class) of every piece type.
_PIECES = (
    (3, 1, 0, 0),
    (1, 0, 3, 0),
    (0, 3, 1, 0),
    (1, 3, 0, 0),
    (3, 0, 1, 0),
    (0, 1, 3, 0),
    (2, 0, 0, 1),
    (0, 2, 0, 1),
    (0, 0, 2, 1),
    (1, 1, 0, 2),
    (1, 0, 1, 2),
    (0, 1, 1, 2),
    (1, 1, 1, 3),
)
_CLASS_COUNTS = (13, 3, 1, 1)


def _index(x: int, y: int, z: int) -> int:
    return x + D * (y + D * z)


@dataclass(frozen=True)
class _Piece:
    offsets: tuple[int, ...]
    piece_class: int


class Puzzle:
    """The puzzle board, the piece shapes and the number of pieces left per class."""

    def __init__(self) -> None:
        self.cells = [True] * (SIZE + 1)
        for x, y, z in product(range(1, 6), repeat=3):
            self.cells[_index(x, y, z)] = False
        self.pieces = [
            _Piece(
                tuple(
                    sorted(
                        _index(x, y, z)
                        for x in range(xm + 1)
                        for y in range(ym + 1)
                        for z in range(zm + 1)
                    )
                ),
                cls,
            )
            for xm, ym, zm, cls in _PIECES
        ]
        self.piece_count = list(_CLASS_COUNTS)
        self.trials = 0

    def _occupied(self, index: int) -> bool:
        return index > SIZE or self.cells[index]

    def fit(self, piece: int, position: int) -> bool:
        """Return True if the piece fits with its origin at ``position``."""
        return not any(
            self._occupied(position + k) for k in self.pieces[piece].offsets
        )

    def place(self, piece: int, position: int) -> int:
        """Put the piece down; return the next free cell from ``position``, or 0."""
        shape = self.pieces[piece]
        for k in shape.offsets:
            self.cells[position + k] = True
        self.piece_count[shape.piece_class] -= 1
        return next(
            (k for k in range(position, SIZE + 1) if not self.cells[k]), 0
        )

    def remove(self, piece: int, position: int) -> None:
        """Take the piece back off the board."""
        shape = self.pieces[piece]
        for k in shape.offsets:
            self.cells[position + k] = False
        self.piece_count[shape.piece_class] += 1

    def trial(self, position: int) -> bool:
        """Try every piece at ``position`` and recurse; True once the box is full."""
        self.trials += 1
        for piece, shape in enumerate(self.pieces):
            if self.piece_count[shape.piece_class] != 0 and self.fit(piece, position):
                following = self.place(piece, position)
                if self.trial(following) or following == 0:
                    return True
                self.remove(piece, position)
        return False


def run_puzzle() -> tuple[int, int]:
    """Solve the puzzle once; return the first free cell and the number of trials."""
    puzzle = Puzzle()
    start = _index(1, 1, 1)
    if not puzzle.fit(0, start):
        raise BenchmarkError("Error1 in Puzzle")
    first_free = puzzle.place(0, start)
    if not puzzle.trial(first_free):
        raise BenchmarkError("Error2 in Puzzle.")
    if puzzle.trials != EXPECTED_TRIALS:
        raise BenchmarkError("Error3 in Puzzle.")
    return first_free, puzzle.trials