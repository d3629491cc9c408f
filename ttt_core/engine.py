from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .board import CELL_COUNT, EMPTY, PLAYER_O, PLAYER_X, PLAYERS, Board, Mark
from .rules import check_index, evaluate, is_full, open_cells, other_player, winning_line
from .state import (
    CONTINUE,
    DRAW,
    IGNORED,
    WON,
    GameStatus,
    MoveResult,
    in_progress,
    status_message,
)


class GameEngine:
    """
    Owns one round of tic-tac-toe: the board, whose turn it is and the status.

    Instances are independent; nothing is shared between engines. The engine is
    not thread-safe and expects its owner to serialize calls.
    """

    def __init__(self) -> None:
        self._grid: List[Mark] = [EMPTY] * CELL_COUNT
        self._current: Mark = PLAYER_X
        self._status: GameStatus = in_progress()

    @property
    def board(self) -> Board:
        return Board(grid=tuple(self._grid))

    @property
    def current_player(self) -> Mark:
        return self._current

    @property
    def status(self) -> GameStatus:
        return self._status

    def legal_moves(self) -> List[int]:
        if self._status.is_terminal:
            return []
        return open_cells(self._grid)

    def apply_move(self, index: int) -> MoveResult:
        """
        Places the current player's mark on `index`.

        Moves on a finished game or an occupied cell leave everything untouched
        and return an 'ignored' result. An index outside 0-8 raises InvalidCellError.
        """
        index = check_index(index)
        if self._status.is_terminal or self._grid[index] != EMPTY:
            return MoveResult(IGNORED, self._status)

        player = self._current
        self._grid[index] = player
        line = winning_line(self._grid)
        if line is not None:
            # no flip once the game is over
            self._status = GameStatus(WON, winner=player, line=line)
            return MoveResult(WON, self._status, player=player)
        if is_full(self._grid):
            self._status = GameStatus(DRAW)
            return MoveResult(DRAW, self._status)

        self._current = other_player(player)
        return MoveResult(CONTINUE, self._status, player=self._current)

    def reset(self) -> None:
        self._grid = [EMPTY] * CELL_COUNT
        self._current = PLAYER_X
        self._status = in_progress()

    def copy(self) -> 'GameEngine':
        clone = GameEngine()
        clone._grid = list(self._grid)
        clone._current = self._current
        clone._status = self._status
        return clone

    def snapshot(self) -> Dict[str, Any]:
        """JSON-friendly view of the engine, accepted back by from_snapshot."""
        s = self._status
        return {
            "board": list(self._grid),
            "currentPlayer": self._current,
            "status": s.kind,
            "winner": s.winner,
            "line": list(s.line) if s.line is not None else None,
            "message": status_message(s),
        }

    @classmethod
    def from_snapshot(cls, obj: Mapping[str, Any]) -> 'GameEngine':
        """
        Rebuilds an engine from snapshot() output.

        The status is derived again from the board; the board must be reachable
        by alternating play starting with X, and any stated status, winner or
        current player must agree with it. Raises ValueError otherwise.
        """
        if not isinstance(obj, Mapping):
            raise ValueError("state must be an object")
        raw = obj.get("board")
        if not isinstance(raw, (list, tuple)) or len(raw) != CELL_COUNT:
            raise ValueError(f"board must be a list of {CELL_COUNT} cells")
        grid: List[Mark] = []
        for cell in raw:
            mark = EMPTY if cell is None else cell
            if mark not in (EMPTY, PLAYER_X, PLAYER_O):
                raise ValueError(f"unknown cell value: {cell!r}")
            grid.append(mark)

        xs = grid.count(PLAYER_X)
        os_ = grid.count(PLAYER_O)
        if xs - os_ not in (0, 1):
            raise ValueError(f"impossible mark counts: X={xs} O={os_}")

        status = evaluate(grid)
        if status.kind == WON:
            last_mover = PLAYER_X if xs > os_ else PLAYER_O
            if status.winner != last_mover or _has_line_for(grid, other_player(last_mover)):
                raise ValueError("board has a win that could not have been reached")
            expected = status.winner
        elif status.kind == DRAW:
            expected = PLAYER_X
        else:
            expected = PLAYER_X if xs == os_ else PLAYER_O

        current = obj.get("currentPlayer", expected)
        if current not in PLAYERS:
            raise ValueError(f"unknown player: {current!r}")
        if current != expected:
            raise ValueError(f"currentPlayer {current} does not match the board (expected {expected})")
        stated = obj.get("status")
        if stated is not None and stated != status.kind:
            raise ValueError(f"status {stated!r} does not match the board ({status.kind})")
        winner = obj.get("winner")
        if winner is not None and winner != status.winner:
            raise ValueError(f"winner {winner!r} does not match the board")

        engine = cls()
        engine._grid = grid
        engine._current = current
        engine._status = status
        return engine

    def __repr__(self) -> str:
        return f"GameEngine(board={''.join(c or '.' for c in self._grid)!r}, current={self._current!r}, status={self._status.kind!r})"


def _has_line_for(grid: List[Mark], player: Mark) -> bool:
    masked: List[Mark] = [c if c == player else EMPTY for c in grid]
    return winning_line(masked) is not None
