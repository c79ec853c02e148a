from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .board import ARROWS, Board, Cell, Dir

DELTAS: Dict[Dir, Tuple[int, int]] = {
    Dir.UP: (0, -1),
    Dir.DOWN: (0, 1),
    Dir.LEFT: (-1, 0),
    Dir.RIGHT: (1, 0),
}

OPPOSITE: Dict[Dir, Dir] = {
    Dir.UP: Dir.DOWN,
    Dir.DOWN: Dir.UP,
    Dir.LEFT: Dir.RIGHT,
    Dir.RIGHT: Dir.LEFT,
}

# Up -> Left -> Down -> Right -> Up
_ROTATE_LEFT: Dict[Dir, Dir] = {
    Dir.UP: Dir.LEFT,
    Dir.LEFT: Dir.DOWN,
    Dir.DOWN: Dir.RIGHT,
    Dir.RIGHT: Dir.UP,
}
_ROTATE_RIGHT: Dict[Dir, Dir] = {v: k for k, v in _ROTATE_LEFT.items()}


class ShuffleMode(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    RANDOM = 'random'


def parse_shuffle_mode(text: Optional[str]) -> ShuffleMode:
    """Maps 'l'/'left' and 'r'/'right' to rotations; anything else shuffles randomly."""
    value = (text or '').strip().lower()
    if value in ('l', 'left'):
        return ShuffleMode.LEFT
    if value in ('r', 'right'):
        return ShuffleMode.RIGHT
    return ShuffleMode.RANDOM


def rotate_left(d: Dir) -> Dir:
    return _ROTATE_LEFT.get(d, d)


def rotate_right(d: Dir) -> Dir:
    return _ROTATE_RIGHT.get(d, d)


def random_dir(rng: random.Random) -> Dir:
    return ARROWS[rng.randrange(len(ARROWS))]


def shuffle_dir(d: Dir, mode: ShuffleMode, rng: random.Random) -> Dir:
    """Re-colours one arrow. Random mode always picks a different direction."""
    if d == Dir.EMPTY:
        return d
    if mode is ShuffleMode.LEFT:
        return rotate_left(d)
    if mode is ShuffleMode.RIGHT:
        return rotate_right(d)
    newdir = d
    while newdir == d:
        newdir = random_dir(rng)
    return newdir


@dataclass
class Slide:
    """The walk of an arrow: its same-direction run, then the empty cells in front of it."""
    direction: Dir
    cells: List[Cell]
    empty: List[Cell]
    removal: bool


def collect_slide(board: Board, x: int, y: int) -> Optional[Slide]:
    """
    Walks from (x, y) in the direction of its arrow.
    Returns None when the cell is empty or the run is blocked by a different arrow.
    The slide is a removal when its last empty cell sits on the edge of the board.
    """
    d = board.at(x, y)
    if d == Dir.EMPTY:
        return None
    dx, dy = DELTAS[d]

    cells: List[Cell] = []
    px, py = x, y
    while board.is_interior(px, py) and board.at(px, py) == d:
        cells.append(Cell(px, py, d))
        px, py = px + dx, py + dy

    empty: List[Cell] = []
    while board.in_bounds(px, py) and board.at(px, py) == Dir.EMPTY:
        empty.append(Cell(px, py, Dir.EMPTY))
        px, py = px + dx, py + dy

    if not empty:
        return None
    last = empty[-1]
    removal = not board.in_bounds(last.x + dx, last.y + dy)
    return Slide(direction=d, cells=cells, empty=empty, removal=removal)


def has_opposite_neighbor(board: Board, x: int, y: int, d: Dir) -> bool:
    opp = OPPOSITE[d]
    for dx, dy in DELTAS.values():
        nx, ny = x + dx, y + dy
        if board.in_bounds(nx, ny) and board.at(nx, ny) == opp:
            return True
    return False


def simplify(board: Board) -> None:
    """
    Rotates arrows that face an opposite-pointing neighbour.
    Each cell gets at most one full turn of attempts and cells already visited are not
    re-checked, so a rare opposite pair can survive.
    """
    for x, y in board.interior():
        d = board.at(x, y)
        if d == Dir.EMPTY:
            continue
        for _ in range(len(ARROWS)):
            if not has_opposite_neighbor(board, x, y, d):
                break
            d = rotate_left(d)
        board.put(x, y, d)
