"""
Arrows core Python package.

This package contains the puzzle engine for the arrows elimination game as
pure-logic modules, so front-ends (web API, CLI) only translate input and
render results.
Modules:
- board.py: Dir, Cell, Coord, Board
- state.py: Updates, Op, MoveRecord
- moves.py: slide collection, rotations, simplification pass
- deal.py: random board deal
- engine.py: Game (setup/update/undo/shuffle/winner)
- scores.py: best-scores ledger
- autoplay.py: board sweeps and automated play
"""
