from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .board import PLAYER_X
from .engine import GameEngine
from .state import DRAW, WON


@dataclass
class GameCounts:
    """Totals over every distinct move sequence that ends a game."""
    games: int = 0
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"games": self.games, "x_wins": self.x_wins, "o_wins": self.o_wins, "draws": self.draws}


def count_games(engine: GameEngine | None = None) -> GameCounts:
    """
    Plays out every legal continuation from `engine` (a fresh game by default)
    with a depth-first search and tallies the terminal outcomes.
    """
    counts = GameCounts()

    def dfs(node: GameEngine) -> None:
        for index in node.legal_moves():
            child = node.copy()
            result = child.apply_move(index)
            if result.kind == WON:
                counts.games += 1
                if result.player == PLAYER_X:
                    counts.x_wins += 1
                else:
                    counts.o_wins += 1
            elif result.kind == DRAW:
                counts.games += 1
                counts.draws += 1
            else:
                dfs(child)

    dfs(engine if engine is not None else GameEngine())
    return counts
