from __future__ import annotations

# Facade module that re-exports the arrows core API.
# The Flask app and tests import from here; single-responsibility modules live
# under arrows_core/*.

try:
    from .arrows_core.board import ARROWS, Board, Cell, Coord, Dir  # type: ignore
    from .arrows_core.state import MoveRecord, Op, Updates  # type: ignore
    from .arrows_core.moves import (  # type: ignore
        DELTAS,
        OPPOSITE,
        ShuffleMode,
        Slide,
        collect_slide,
        has_opposite_neighbor,
        parse_shuffle_mode,
        random_dir,
        rotate_left,
        rotate_right,
        shuffle_dir,
        simplify,
    )
    from .arrows_core.deal import deal_board  # type: ignore
    from .arrows_core.banner import BANNER_HEIGHT, BANNER_WIDTH, WIN_BANNER  # type: ignore
    from .arrows_core.engine import Game  # type: ignore
    from .arrows_core.scores import MAX_ENTRIES, ScoreInfo, Scores, final_score, size_key  # type: ignore
    from .arrows_core.autoplay import AutoplayResult, autoplay, sweep  # type: ignore
except ImportError:
    from arrows_core.board import ARROWS, Board, Cell, Coord, Dir  # type: ignore
    from arrows_core.state import MoveRecord, Op, Updates  # type: ignore
    from arrows_core.moves import (  # type: ignore
        DELTAS,
        OPPOSITE,
        ShuffleMode,
        Slide,
        collect_slide,
        has_opposite_neighbor,
        parse_shuffle_mode,
        random_dir,
        rotate_left,
        rotate_right,
        shuffle_dir,
        simplify,
    )
    from arrows_core.deal import deal_board  # type: ignore
    from arrows_core.banner import BANNER_HEIGHT, BANNER_WIDTH, WIN_BANNER  # type: ignore
    from arrows_core.engine import Game  # type: ignore
    from arrows_core.scores import MAX_ENTRIES, ScoreInfo, Scores, final_score, size_key  # type: ignore
    from arrows_core.autoplay import AutoplayResult, autoplay, sweep  # type: ignore


def main() -> None:
    # CLI driver delegated to arrows_core.cli
    try:
        from .arrows_core.cli import main as _main  # type: ignore
    except ImportError:
        from arrows_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
