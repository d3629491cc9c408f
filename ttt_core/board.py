from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

Mark = str  # '', 'X', 'O'
Coord = Tuple[int, int]

EMPTY: Mark = ''
PLAYER_X: Mark = 'X'
PLAYER_O: Mark = 'O'
PLAYERS: Tuple[Mark, Mark] = (PLAYER_X, PLAYER_O)

SIZE = 3
CELL_COUNT = SIZE * SIZE


class InvalidCellError(ValueError):
    """Raised when a caller addresses a cell outside the 3x3 board."""


WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


@dataclass(frozen=True)
class Board:
    """Immutable view of the 3x3 grid."""
    grid: Tuple[Mark, ...]  # row-major, length == 9

    @classmethod
    def empty(cls) -> 'Board':
        return cls(grid=(EMPTY,) * CELL_COUNT)

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        if not (0 <= r < SIZE and 0 <= c < SIZE):
            raise InvalidCellError(f"row/column out of range: ({r}, {c})")
        return r * SIZE + c

    def at(self, r: int, c: int) -> Mark:
        return self.grid[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(SIZE):
            for c in range(SIZE):
                yield (r, c)

    def pretty(self) -> str:
        """Generates a human-readable string representation of the board."""
        lines: List[str] = []
        for r in range(SIZE):
            row = [self.at(r, c) or "." for c in range(SIZE)]
            lines.append(" ".join(row))
        return "\n".join(lines)
