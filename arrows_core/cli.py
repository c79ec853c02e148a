from __future__ import annotations

import argparse
import os
from typing import Optional

from .autoplay import autoplay, sweep
from .engine import Game
from .moves import ShuffleMode, parse_shuffle_mode
from .scores import Scores
from .state import Op, Updates


def report_score(game: Game, scores: Scores) -> None:
    best = scores.update(game)
    if best is not None:
        print(f"New best score: moves={best.moves} seq={best.max_seq} score={best.score}")
    else:
        print(f"Score: moves={game.moves} seq={game.max_seq} score={game.final_score}")


def _finish_if_cleared(game: Game, scores: Scores) -> bool:
    if not game.is_cleared() or game.completed:
        return False
    game.winner()
    print(game.board.pretty())
    report_score(game, scores)
    return True


def play(game: Game, mode: ShuffleMode, scores: Scores) -> None:
    """Line-based play: 'x,y' moves the arrow at column x, row y."""
    cursor = (1, 1)
    print(game.board.pretty(cursor))
    while True:
        text = input('Enter x,y (or u=undo s=shuffle h=sweep q=quit): ').strip().lower()
        if text in ('q', 'quit'):
            return
        if text == 'u':
            x, y, ok = game.undo()
            if not ok:
                print('Nothing to undo.')
            else:
                cursor = (x, y)
        elif text == 's':
            game.shuffle(mode)
        elif text == 'h':
            sweep(game)
        else:
            sep = ',' if ',' in text else ' '
            try:
                x_s, y_s = [t for t in text.split(sep) if t != '']
                x, y = int(x_s), int(y_s)
            except ValueError:
                print('Could not parse. Try again.')
                continue
            cx, cy, res = game.update(x, y, Op.MOVE)
            if res == Updates.INVALID:
                print('Outside the board. Try again.')
                continue
            if res == Updates.NONE:
                print('That arrow cannot move.')
            cursor = (cx, cy)
        if _finish_if_cleared(game, scores):
            return
        print(game.board.pretty(cursor))
        print(game.status())


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description='Arrows elimination puzzle')
    parser.add_argument('--width', type=int, default=int(os.getenv('ARROWS_WIDTH', '20')), help='Board width (without border)')
    parser.add_argument('--height', type=int, default=int(os.getenv('ARROWS_HEIGHT', '20')), help='Board height (without border)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for deal and shuffles')
    parser.add_argument('--shuffle', default='random', help='Shuffle direction (left, right, random)')
    parser.add_argument('--play', action='store_true', help='Play interactively instead of autoplay')
    parser.add_argument('--max-turns', type=int, default=1000, help='Autoplay turn limit')
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error('invalid width or height')

    mode = parse_shuffle_mode(args.shuffle)
    scores = Scores()
    game = Game(seed=args.seed)
    # add border to simplify boundary checks
    game.setup(args.width + 2, args.height + 2)

    if args.play:
        play(game, mode, scores)
        return

    print('Initial board:')
    print(game.board.pretty())
    res = autoplay(game, mode, max_turns=args.max_turns)
    print(f"\nturns={res.turns} shuffles={res.shuffles} {game.status()}")
    if res.won:
        print(game.board.pretty())
        report_score(game, scores)
    else:
        print('Board not cleared within the turn limit.')


if __name__ == '__main__':
    main()
