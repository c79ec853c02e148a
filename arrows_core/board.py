from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional, Tuple

Coord = Tuple[int, int]  # (x, y) == (column, row)


class Dir(IntEnum):
    EMPTY = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


ARROWS = (Dir.UP, Dir.DOWN, Dir.LEFT, Dir.RIGHT)

_GLYPHS = {
    Dir.EMPTY: '.',
    Dir.UP: '^',
    Dir.DOWN: 'v',
    Dir.LEFT: '<',
    Dir.RIGHT: '>',
}


class Cell(NamedTuple):
    x: int
    y: int
    d: Dir


@dataclass
class Board:
    """Mutable grid of arrow directions, including a one-cell empty border on every side."""
    width: int
    height: int
    grid: List[List[Dir]] = field(default_factory=list)  # grid[y][x]

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Dir.EMPTY] * self.width for _ in range(self.height)]

    @classmethod
    def from_rows(cls, rows: List[str]) -> 'Board':
        """Builds a board from text rows using the same glyphs as pretty()."""
        lookup = {g: d for d, g in _GLYPHS.items()}
        grid = [[lookup[ch] for ch in row] for row in rows]
        return cls(width=len(rows[0]), height=len(rows), grid=grid)

    def at(self, x: int, y: int) -> Dir:
        return self.grid[y][x]

    def put(self, x: int, y: int, d: Dir) -> None:
        self.grid[y][x] = d

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        """True for playable cells; the border rows and columns are never playable."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def interior(self) -> Iterable[Coord]:
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                yield (x, y)

    def count_arrows(self) -> int:
        return sum(1 for row in self.grid for d in row if d != Dir.EMPTY)

    def pretty(self, cursor: Optional[Coord] = None) -> str:
        """Generates a plain-text dump of the grid; the cursor cell is bracketed."""
        lines: List[str] = []
        for y, row in enumerate(self.grid):
            out: List[str] = []
            for x, d in enumerate(row):
                glyph = _GLYPHS[d]
                out.append(f"[{glyph}]" if cursor == (x, y) else f" {glyph} ")
            lines.append("".join(out).rstrip())
        return "\n".join(lines)
