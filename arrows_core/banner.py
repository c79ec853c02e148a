from __future__ import annotations

from typing import List

from .board import Dir

_U, _D, _L, _R, _E = Dir.UP, Dir.DOWN, Dir.LEFT, Dir.RIGHT, Dir.EMPTY

# 20 x 15 picture painted over the cleared board.
WIN_BANNER: List[List[Dir]] = [
    [_D, _D, _U, _U, _D, _D, _U, _U, _D, _D, _D, _D, _U, _U, _D, _D, _U, _U, _D, _D],
    [_U, _U, _U, _U, _U, _U, _U, _D, _U, _U, _U, _U, _D, _U, _U, _U, _U, _U, _U, _U],
    [_U, _U, _U, _U, _U, _U, _U, _U, _U, _E, _E, _U, _U, _U, _U, _U, _U, _U, _U, _U],
    [_D, _U, _D, _D, _U, _E, _U, _U, _U, _E, _E, _U, _U, _U, _U, _U, _U, _U, _U, _U],
    [_L, _L, _U, _U, _E, _E, _U, _U, _U, _E, _E, _U, _U, _U, _U, _U, _U, _U, _U, _U],
    [_L, _L, _U, _U, _E, _E, _U, _U, _U, _D, _D, _U, _U, _U, _U, _U, _D, _D, _U, _U],
    [_L, _L, _U, _U, _E, _E, _U, _E, _U, _U, _U, _U, _E, _E, _E, _U, _U, _U, _U, _R],
    [_L, _L, _L, _L, _L, _L, _L, _L, _L, _L, _R, _R, _R, _R, _R, _R, _R, _R, _R, _R],
    [_D, _D, _D, _E, _E, _E, _D, _D, _D, _D, _D, _D, _D, _D, _E, _E, _E, _D, _D, _R],
    [_D, _U, _U, _E, _E, _E, _U, _U, _D, _U, _U, _D, _U, _U, _E, _E, _E, _U, _U, _R],
    [_D, _U, _U, _E, _E, _E, _U, _U, _D, _U, _U, _D, _U, _U, _D, _E, _E, _U, _U, _R],
    [_D, _U, _U, _E, _E, _E, _U, _U, _D, _U, _U, _D, _U, _U, _U, _D, _E, _U, _U, _R],
    [_D, _U, _U, _E, _D, _E, _U, _U, _D, _U, _U, _D, _U, _U, _D, _U, _D, _U, _U, _R],
    [_D, _U, _U, _D, _U, _D, _U, _U, _D, _U, _U, _D, _U, _U, _D, _D, _U, _U, _U, _R],
    [_D, _D, _U, _U, _D, _U, _U, _D, _D, _U, _U, _D, _U, _U, _D, _D, _D, _U, _U, _R],
]

BANNER_WIDTH = len(WIN_BANNER[0])
BANNER_HEIGHT = len(WIN_BANNER)
