from __future__ import annotations

import os
import sys
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        Board,
        Cell,
        Dir,
        Game,
        MoveRecord,
        Op,
        Scores,
        Updates,
        parse_shuffle_mode,
        sweep as g_sweep,
    )
except ImportError:
    from game import (  # type: ignore
        Board,
        Cell,
        Dir,
        Game,
        MoveRecord,
        Op,
        Scores,
        Updates,
        parse_shuffle_mode,
        sweep as g_sweep,
    )

DEFAULT_WIDTH = int(os.getenv("ARROWS_WIDTH", "20"))
DEFAULT_HEIGHT = int(os.getenv("ARROWS_HEIGHT", "20"))

app = Flask(__name__)

# Best scores for the lifetime of the process; loading and saving them is up to the host.
scores = Scores()

_OPS = {"peek": Op.PEEK, "move": Op.MOVE, "remove": Op.REMOVE}


def _debug() -> bool:
    return os.getenv("ARROWS_DEBUG", "0").lower() in ("1", "true", "yes", "on")


# ---------- JSON conversion ----------

def board_to_json(b: Board) -> Dict[str, Any]:
    return {"width": int(b.width), "height": int(b.height), "grid": [[int(d) for d in row] for row in b.grid]}


def board_from_json(obj: Dict[str, Any]) -> Board:
    width, height = int(obj["width"]), int(obj["height"])
    grid = [[Dir(int(d)) for d in row] for row in obj["grid"]]
    if len(grid) != height or any(len(row) != width for row in grid):
        raise ValueError("grid does not match width/height")
    return Board(width=width, height=height, grid=grid)


def record_to_json(r: MoveRecord) -> Dict[str, Any]:
    return {
        "cells": [[c.x, c.y, int(c.d)] for c in r.cells],
        "count": r.count,
        "removed": r.removed,
        "maxSeq": r.max_seq,
    }


def record_from_json(obj: Dict[str, Any], board: Board) -> MoveRecord:
    cells = [Cell(int(x), int(y), Dir(int(d))) for x, y, d in obj["cells"]]
    for c in cells:
        if not board.in_bounds(c.x, c.y):
            raise ValueError(f"undo cell ({c.x}, {c.y}) outside the board")
    return MoveRecord(
        cells=cells,
        count=int(obj["count"]),
        removed=bool(obj["removed"]),
        max_seq=int(obj.get("maxSeq", 0)),
    )


def state_to_json(g: Game) -> Dict[str, Any]:
    return {
        "board": board_to_json(g.board),
        "cellWidth": g.cell_width,
        "cellHeight": g.cell_height,
        "count": g.count,
        "removed": g.removed,
        "moves": g.moves,
        "seq": g.seq,
        "maxSeq": g.max_seq,
        "score": g.score,
        "finalScore": g.final_score,
        "completed": g.completed,
        "stack": [record_to_json(r) for r in g.stack],
        "status": g.status(),
    }


def _parse_seed(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError("seed must be an integer")
    return int(value)


def json_to_state(obj: Dict[str, Any], seed: Optional[int] = None) -> Game:
    g = Game(seed=seed)
    g.board = board_from_json(obj["board"])
    g.cell_width = max(1, int(obj.get("cellWidth", 1)))
    g.cell_height = max(1, int(obj.get("cellHeight", 1)))
    g.count = int(obj.get("count", g.board.count_arrows()))
    g.removed = int(obj.get("removed", 0))
    g.moves = int(obj.get("moves", 0))
    g.seq = int(obj.get("seq", 0))
    g.max_seq = int(obj.get("maxSeq", 0))
    g.score = int(obj.get("score", 0))
    g.final_score = int(obj.get("finalScore", 0))
    g.completed = bool(obj.get("completed", False))
    g.stack = [record_from_json(r, g.board) for r in obj.get("stack", [])]
    return g


def _load_game(body: Dict[str, Any]) -> Tuple[Optional[Game], Any]:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, (jsonify({"ok": False, "error": "state required"}), 400)
    try:
        return json_to_state(s_in, seed=_parse_seed(body.get("seed"))), None
    except (KeyError, TypeError, ValueError) as e:
        return None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)


def _finish(g: Game) -> Dict[str, Any]:
    """Latches a cleared board and records its score."""
    out: Dict[str, Any] = {"winner": False, "newBest": None}
    if g.is_cleared() and not g.completed:
        out["banner"] = g.winner()
        best = scores.update(g)
        out["winner"] = True
        out["newBest"] = best.to_json() if best is not None else None
        if _debug():
            print(f"[api] game cleared {g.width}x{g.height} final={g.final_score} best={best is not None}")
    return out


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        width = int(body.get("width", DEFAULT_WIDTH))
        height = int(body.get("height", DEFAULT_HEIGHT))
        cell_width = int(body.get("cellWidth", 1))
        cell_height = int(body.get("cellHeight", 1))
        seed = _parse_seed(body.get("seed"))
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad request: {e}"}), 400
    if width <= 0 or height <= 0 or cell_width <= 0 or cell_height <= 0:
        return jsonify({"ok": False, "error": "invalid width or height"}), 400
    g = Game(seed=seed)
    # add border to simplify boundary checks
    g.setup(width + 2, height + 2, cell_width, cell_height)
    return jsonify({"ok": True, "state": state_to_json(g)})


@app.post("/api/update")
def api_update() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    g, err = _load_game(body)
    if err is not None:
        return err
    op = _OPS.get(str(body.get("op", "move")).lower())
    if op is None:
        return jsonify({"ok": False, "error": "op must be one of peek, move, remove"}), 400
    try:
        x, y = int(body["x"]), int(body["y"])
    except (KeyError, TypeError, ValueError):
        return jsonify({"ok": False, "error": "x and y required"}), 400
    cx, cy, res = g.update(x, y, op)
    out = {"ok": True, "result": res.name.lower(), "cell": [cx, cy]}
    out.update(_finish(g))
    out["state"] = state_to_json(g)
    return jsonify(out)


@app.post("/api/undo")
def api_undo() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    g, err = _load_game(body)
    if err is not None:
        return err
    cx, cy, ok = g.undo()
    return jsonify({
        "ok": True,
        "undone": ok,
        "result": Updates.UNDO.name.lower() if ok else Updates.NONE.name.lower(),
        "cell": [cx, cy],
        "state": state_to_json(g),
    })


@app.post("/api/shuffle")
def api_shuffle() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    g, err = _load_game(body)
    if err is not None:
        return err
    g.shuffle(parse_shuffle_mode(body.get("mode")))
    return jsonify({"ok": True, "result": Updates.SHUFFLE.name.lower(), "state": state_to_json(g)})


@app.post("/api/sweep")
def api_sweep() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    g, err = _load_game(body)
    if err is not None:
        return err
    before = g.count
    res = g_sweep(g)
    removed = before - g.count
    out = {"ok": True, "result": res.name.lower(), "removedNow": removed}
    out.update(_finish(g))
    out["state"] = state_to_json(g)
    return jsonify(out)


@app.post("/api/winner")
def api_winner() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    g, err = _load_game(body)
    if err is not None:
        return err
    applied = g.winner()
    return jsonify({"ok": True, "banner": applied, "state": state_to_json(g)})


@app.get("/api/scores")
def api_scores() -> Any:
    try:
        width = int(request.args.get("width", DEFAULT_WIDTH)) + 2
        height = int(request.args.get("height", DEFAULT_HEIGHT)) + 2
    except ValueError:
        return jsonify({"ok": False, "error": "width and height must be integers"}), 400
    return jsonify({"ok": True, "scores": [s.to_json() for s in scores.get(width, height)]})


if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
