from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import Game

MAX_ENTRIES = 10


@dataclass
class ScoreInfo:
    moves: int
    max_seq: int
    score: int

    def to_json(self) -> Dict[str, int]:
        return {"Moves": self.moves, "MaxSeq": self.max_seq, "Score": self.score}

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> 'ScoreInfo':
        return cls(moves=int(obj["Moves"]), max_seq=int(obj["MaxSeq"]), score=int(obj["Score"]))


def size_key(width: int, height: int) -> int:
    return width * 1000 + height


def final_score(game: 'Game') -> int:
    """Running score plus a bonus that rewards clearing the board with few extra moves."""
    n = game.removed - game.moves
    return game.score + (n * n) // 2


class Scores:
    """Best scores per board size, best first, at most MAX_ENTRIES each."""

    def __init__(self, table: Optional[Dict[int, List[ScoreInfo]]] = None) -> None:
        self.table: Dict[int, List[ScoreInfo]] = table if table is not None else {}

    def update(self, game: 'Game') -> Optional[ScoreInfo]:
        """Records a finished game; returns the entry only when it is the new best for the size."""
        game.final_score = final_score(game)
        info = ScoreInfo(moves=game.moves, max_seq=game.max_seq, score=game.final_score)

        key = size_key(game.width, game.height)
        entries = self.table.get(key)
        if not entries:
            self.table[key] = [info]
            return info

        for i, existing in enumerate(entries):
            if info.score > existing.score:
                entries.insert(i, info)
                del entries[MAX_ENTRIES:]
                return info if i == 0 else None

        if len(entries) < MAX_ENTRIES:
            entries.append(info)
        return None

    def get(self, width: int, height: int) -> List[ScoreInfo]:
        return self.table.get(size_key(width, height), [])

    def to_json(self) -> Dict[str, List[Dict[str, int]]]:
        return {str(k): [s.to_json() for s in v] for k, v in self.table.items()}

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> 'Scores':
        table = {int(k): [ScoreInfo.from_json(s) for s in v] for k, v in (obj or {}).items()}
        return cls(table)
