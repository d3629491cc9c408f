"""
Tic-tac-toe core Python package.

This package holds the game rules as plain data structures and pure-logic
helpers, kept apart from the Flask app so every piece can be tested alone.
Modules:
- board.py: Board, Mark, marks and the winning lines
- state.py: GameStatus, MoveResult
- rules.py: index validation, win/draw detection
- engine.py: GameEngine (the stateful game object)
- exhaustive.py: exhaustive game enumeration used as a rules cross-check
- cli.py: terminal front end
"""
