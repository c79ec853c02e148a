from __future__ import annotations

import os
from dataclasses import dataclass

from .engine import Game
from .moves import ShuffleMode
from .state import Op, Updates


def _debug() -> bool:
    return os.getenv('ARROWS_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


@dataclass
class AutoplayResult:
    turns: int
    shuffles: int
    won: bool


def sweep(game: Game) -> Updates:
    """
    Tries to remove every interior arrow once, in row-major order, and returns the most
    severe result seen. Chains created earlier in the pass are picked up later in it.
    The streak restarts after a pass that changed the board but did not clear it.
    """
    moved = Updates.INVALID
    for cy in range(1, game.height - 1):
        for cx in range(1, game.width - 1):
            x, y = game.to_screen(0, 0, cx, cy)
            _, _, res = game.update(x, y, Op.REMOVE)
            if res > moved:
                moved = res

    if game.count > 0 and moved != Updates.NONE:
        game.seq = 0
    return moved


def autoplay(game: Game, mode: ShuffleMode = ShuffleMode.RANDOM, max_turns: int = 1000) -> AutoplayResult:
    """Sweeps until the board is clear, shuffling whenever a sweep removes nothing."""
    turns = shuffles = 0
    while turns < max_turns and not game.is_cleared():
        turns += 1
        count = game.count
        sweep(game)
        if _debug():
            print(f"[autoplay] turn={turns} removed={count - game.count} {game.status()}")
        if game.is_cleared():
            break
        if game.count == count:
            game.shuffle(mode)
            shuffles += 1

    won = game.is_cleared()
    if won and not game.completed:
        game.winner()
    return AutoplayResult(turns=turns, shuffles=shuffles, won=won)
