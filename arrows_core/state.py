from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from .board import Cell


class Updates(IntEnum):
    """Result of an update, ordered by severity so callers can keep the strongest one."""
    INVALID = 0  # invalid coordinates
    NONE = 1     # nothing happened
    MOVE = 2     # arrows moved
    REMOVE = 3   # arrows removed

    # Never returned by Game.update(); callers use them to pick a cue after shuffle/undo.
    SHUFFLE = -1
    UNDO = -2


class Op(IntEnum):
    PEEK = 0
    MOVE = 1
    REMOVE = 2


@dataclass
class MoveRecord:
    """Undo entry: prior value of every cell touched by one update."""
    cells: List[Cell] = field(default_factory=list)
    count: int = 0  # arrow cells in the moving run
    removed: bool = False
    max_seq: int = 0  # streak high-water mark before the update
