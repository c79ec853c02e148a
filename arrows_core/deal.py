from __future__ import annotations

import random
from typing import Optional

from .board import Board
from .moves import random_dir, simplify


def deal_board(width: int, height: int, rng: Optional[random.Random] = None) -> Board:
    """Creates a width x height board (border included) with a random arrow in every interior cell."""
    if width < 3 or height < 3:
        raise ValueError(f'Invalid board size {width}x{height}: need at least one interior cell')
    rng = rng or random.Random()
    board = Board(width=width, height=height)
    for x, y in board.interior():
        board.put(x, y, random_dir(rng))
    # No freshly dealt board should start with trivially opposed neighbours.
    simplify(board)
    return board
