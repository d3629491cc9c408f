from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# Used by the Flask app and tests; single-responsibility modules live under ttt_core/*.

# Robust imports so this module works when executed as part of a package
# or imported directly from the repo root.
try:
    from .ttt_core.board import (  # type: ignore
        Board,
        Mark,
        Coord,
        EMPTY,
        PLAYER_X,
        PLAYER_O,
        WINNING_LINES,
    )
    from .ttt_core.state import (  # type: ignore
        GameStatus,
        MoveResult,
        IN_PROGRESS,
        WON,
        DRAW,
        IGNORED,
        CONTINUE,
        status_message,
    )
    from .ttt_core.rules import (  # type: ignore
        InvalidCellError,
        check_index,
        other_player,
        winning_line,
        is_full,
        open_cells,
        evaluate,
    )
    from .ttt_core.engine import GameEngine  # type: ignore
    from .ttt_core.exhaustive import GameCounts, count_games  # type: ignore
except ImportError:
    from ttt_core.board import (  # type: ignore
        Board,
        Mark,
        Coord,
        EMPTY,
        PLAYER_X,
        PLAYER_O,
        WINNING_LINES,
    )
    from ttt_core.state import (  # type: ignore
        GameStatus,
        MoveResult,
        IN_PROGRESS,
        WON,
        DRAW,
        IGNORED,
        CONTINUE,
        status_message,
    )
    from ttt_core.rules import (  # type: ignore
        InvalidCellError,
        check_index,
        other_player,
        winning_line,
        is_full,
        open_cells,
        evaluate,
    )
    from ttt_core.engine import GameEngine  # type: ignore
    from ttt_core.exhaustive import GameCounts, count_games  # type: ignore


def new_game() -> GameEngine:
    return GameEngine()


def play_moves(moves, engine: GameEngine | None = None) -> GameEngine:
    """Applies a sequence of cell indices in order and returns the engine."""
    engine = engine if engine is not None else GameEngine()
    for index in moves:
        engine.apply_move(index)
    return engine


def main() -> None:
    # CLI driver delegated to ttt_core.cli
    try:
        from .ttt_core.cli import main as _main  # type: ignore
    except ImportError:
        from ttt_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
