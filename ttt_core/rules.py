from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .board import CELL_COUNT, EMPTY, PLAYER_O, PLAYER_X, WINNING_LINES, InvalidCellError, Mark
from .state import DRAW, WON, GameStatus, in_progress


def check_index(index: object) -> int:
    """Validates a cell index and returns it as an int."""
    # bool is an int subclass but never a sensible cell
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidCellError(f"cell index must be an integer, got {index!r}")
    if not 0 <= index < CELL_COUNT:
        raise InvalidCellError(f"cell index out of range 0-{CELL_COUNT - 1}: {index}")
    return index


def other_player(player: Mark) -> Mark:
    return PLAYER_O if player == PLAYER_X else PLAYER_X


def winning_line(grid: Sequence[Mark]) -> Optional[Tuple[int, int, int]]:
    """
    Returns the first winning line fully held by one player, or None.
    Lines are scanned in WINNING_LINES order so the result is deterministic.
    """
    for a, b, c in WINNING_LINES:
        if grid[a] != EMPTY and grid[a] == grid[b] == grid[c]:
            return (a, b, c)
    return None


def is_full(grid: Sequence[Mark]) -> bool:
    return all(cell != EMPTY for cell in grid)


def open_cells(grid: Sequence[Mark]) -> List[int]:
    """Indices of empty cells in ascending order."""
    return [i for i, cell in enumerate(grid) if cell == EMPTY]


def evaluate(grid: Sequence[Mark]) -> GameStatus:
    """Derives the game status from a board. The win check must run before the draw check."""
    line = winning_line(grid)
    if line is not None:
        return GameStatus(WON, winner=grid[line[0]], line=line)
    if is_full(grid):
        return GameStatus(DRAW)
    return in_progress()
