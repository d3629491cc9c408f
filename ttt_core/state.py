from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Mark

IN_PROGRESS = 'in_progress'
WON = 'won'
DRAW = 'draw'

IGNORED = 'ignored'
CONTINUE = 'continue'


@dataclass(frozen=True)
class GameStatus:
    """Result of the game so far. `winner` and `line` are set only when kind == 'won'."""
    kind: str  # 'in_progress', 'won' or 'draw'
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != IN_PROGRESS


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single apply_move call."""
    kind: str  # 'ignored', 'continue', 'won' or 'draw'
    status: GameStatus
    player: Optional[Mark] = None  # next player on 'continue', winner on 'won'

    @property
    def applied(self) -> bool:
        return self.kind != IGNORED


def in_progress() -> GameStatus:
    return GameStatus(IN_PROGRESS)


def status_message(status: GameStatus) -> str:
    """Text shown to players under the board."""
    if status.kind == WON:
        return f"Player {status.winner} won!"
    if status.kind == DRAW:
        return "Draw!"
    return ""
