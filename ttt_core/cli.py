from __future__ import annotations

import argparse
from typing import List, Optional

from .board import Board
from .engine import GameEngine
from .state import CONTINUE, IGNORED, status_message


def parse_cell(text: str) -> int:
    """Accepts a cell index '0'..'8' or a 'r,c' / 'r c' pair."""
    text = text.strip()
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t != '']
    if len(parts) == 1:
        return int(parts[0])
    if len(parts) == 2:
        return Board.empty().index(int(parts[0]), int(parts[1]))
    raise ValueError(f"could not parse cell: {text!r}")


def parse_moves(text: str) -> List[int]:
    return [int(t) for t in text.split(',') if t.strip() != '']


def replay(engine: GameEngine, moves: List[int]) -> None:
    for index in moves:
        mover = engine.current_player
        result = engine.apply_move(index)
        if result.kind == IGNORED:
            print(f"{mover} -> {index}: ignored")
        elif result.kind == CONTINUE:
            print(f"{mover} -> {index}: next is {result.player}")
        else:
            print(f"{mover} -> {index}: {result.kind}")
    print(engine.board.pretty())
    print(status_message(engine.status) or f"Player {engine.current_player} to move")


def play(engine: GameEngine) -> None:
    print(engine.board.pretty())
    while not engine.status.is_terminal:
        text = input(f"Player {engine.current_player}, enter a cell 0-8 or r,c: ")
        try:
            index = parse_cell(text)
            result = engine.apply_move(index)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if result.kind == IGNORED:
            print('Cell already taken. Try again.')
            continue
        print(engine.board.pretty())
    print(status_message(engine.status))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Two-player tic-tac-toe in the terminal')
    parser.add_argument('--moves', default=None, help='Comma-separated cell indices to replay, e.g. 0,3,1,4,2')
    args = parser.parse_args(argv)

    engine = GameEngine()
    if args.moves is not None:
        try:
            moves = parse_moves(args.moves)
            replay(engine, moves)
        except ValueError as e:
            parser.error(str(e))
        return
    play(engine)


if __name__ == '__main__':
    main()
