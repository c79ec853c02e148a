from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .banner import BANNER_HEIGHT, BANNER_WIDTH, WIN_BANNER
from .board import Board, Dir
from .deal import deal_board
from .moves import ShuffleMode, collect_slide, shuffle_dir, simplify
from .state import MoveRecord, Op, Updates


class Game:
    """
    Owns the board, the counters and the undo stack of one arrows game.

    Callers address cells in their own units (pixels, terminal columns...) and the game
    translates them with the cell size given to setup(). Gameplay anomalies are reported
    as Updates values, never raised.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self.board = Board(width=0, height=0)
        self.cell_width = 1
        self.cell_height = 1
        self.stack: List[MoveRecord] = []
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.count = 0
        self.removed = 0
        self.moves = 0
        self.seq = 0
        self.max_seq = 0
        self.score = 0
        self.final_score = 0
        self.completed = False

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def setup(
        self,
        width: int,
        height: int,
        cell_width: int = 1,
        cell_height: int = 1,
        seed: Optional[int] = None,
    ) -> None:
        """Deals a new board; width and height include the border."""
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError(f"Invalid cell size {cell_width}x{cell_height}")
        if seed is not None:
            self.rng.seed(seed)
        self.board = deal_board(width, height, self.rng)
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.stack = []
        self._reset_counters()
        self.count = (width - 2) * (height - 2)

    # ---------- undo stack ----------

    def push(self, record: MoveRecord) -> None:
        self.stack.append(record)

    def pop(self) -> Optional[MoveRecord]:
        if not self.stack:
            return None
        return self.stack.pop()

    # ---------- coordinates ----------

    def to_grid(self, x: int, y: int) -> Tuple[int, int, bool]:
        """Converts caller coordinates to a playable cell; False outside the interior."""
        cx = x // self.cell_width
        cy = y // self.cell_height
        if self.board.is_interior(cx, cy):
            return cx, cy, True
        return -1, -1, False

    def to_screen(self, offset_x: int, offset_y: int, x: int, y: int) -> Tuple[int, int]:
        return offset_x + x * self.cell_width, offset_y + y * self.cell_height

    def peek(self, x: int, y: int) -> Tuple[int, int, Optional[Dir]]:
        cx, cy, ok = self.to_grid(x, y)
        if not ok:
            return -1, -1, None
        return cx, cy, self.board.at(cx, cy)

    # ---------- moves ----------

    def update(self, x: int, y: int, op: Op) -> Tuple[int, int, Updates]:
        """
        Moves or removes the arrow at caller coordinates (x, y).

        A run reaching the edge of the board is removed with either MOVE or REMOVE.
        A run stopped by another arrow only slides forward with MOVE. PEEK never mutates.
        """
        cx, cy, ok = self.to_grid(x, y)
        if not ok:
            return -1, -1, Updates.INVALID
        if op == Op.PEEK:
            return cx, cy, Updates.NONE

        slide = collect_slide(self.board, cx, cy)
        if slide is None:
            return cx, cy, Updates.NONE
        if not slide.removal and op != Op.MOVE:
            return cx, cy, Updates.NONE

        lc = len(slide.cells)
        record = MoveRecord(cells=list(slide.cells), count=lc, removed=slide.removal, max_seq=self.max_seq)

        for c in slide.cells:
            self.board.put(c.x, c.y, Dir.EMPTY)

        if slide.removal:
            if not self.completed:
                for _ in range(lc):
                    self.count -= 1
                    self.removed += 1
                    self.seq += 1
                    self.score += self.seq
                    self.max_seq = max(self.max_seq, self.seq)
            result = Updates.REMOVE
        else:
            # the run packs against whatever stopped it
            empty = slide.empty[-lc:] if len(slide.empty) > lc else slide.empty
            record.cells.extend(empty)
            for c in record.cells[-lc:]:
                self.board.put(c.x, c.y, slide.direction)
            result = Updates.MOVE

        self.push(record)
        if not self.completed:
            self.moves += 1
        return cx, cy, result

    def undo(self) -> Tuple[int, int, bool]:
        """Reverts the last update; returns the last restored cell."""
        record = self.pop()
        if record is None:
            return -1, -1, False

        cx = cy = -1
        for c in record.cells:
            cx, cy = c.x, c.y
            self.board.put(c.x, c.y, c.d)

        if not self.completed:
            self.moves -= 1
            if record.removed:
                self.count += record.count
                self.removed -= record.count
                for _ in range(record.count):
                    if self.seq <= 0:
                        break
                    if self.seq == self.max_seq and self.max_seq > record.max_seq:
                        self.max_seq -= 1
                    self.score -= self.seq
                    self.seq -= 1
        return cx, cy, True

    def shuffle(self, mode: ShuffleMode = ShuffleMode.RANDOM) -> None:
        """Re-colours every arrow. Undo history is dropped since cells change identity."""
        self.count = 0
        self.seq = 0
        for x, y in self.board.coords():
            d = self.board.at(x, y)
            if d == Dir.EMPTY:
                continue
            self.count += 1
            self.board.put(x, y, shuffle_dir(d, mode, self.rng))
        if mode is ShuffleMode.RANDOM:
            simplify(self.board)
        self.stack = []

    # ---------- end of game ----------

    def is_cleared(self) -> bool:
        return self.count == 0

    def winner(self) -> bool:
        """Latches the game as completed and paints the win banner if it fits."""
        self.completed = True
        if BANNER_WIDTH >= self.width or BANNER_HEIGHT >= self.height:
            return False

        ox = (self.width - BANNER_WIDTH) // 2
        oy = (self.height - BANNER_HEIGHT) // 2
        self.count = 0
        for y, row in enumerate(WIN_BANNER):
            for x, d in enumerate(row):
                self.board.put(ox + x, oy + y, d)
                if d != Dir.EMPTY:
                    self.count += 1
        return True

    def status(self) -> str:
        return (
            f"moves={self.moves} remain={self.count} removed={self.removed} "
            f"seq={self.seq}/{self.max_seq} score={self.score}"
        )
