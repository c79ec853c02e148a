import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from game import Board, Game, ShuffleMode, Updates, autoplay, sweep


def game_from_rows(rows):
    g = Game(seed=0)
    g.board = Board.from_rows(rows)
    g.count = g.board.count_arrows()
    return g


SCENARIO = [
    '......',
    '.^..>.',
    '......',
    '......',
    '.<..v.',
    '......',
]


class TestSweep(unittest.TestCase):
    def test_given_outward_arrows_when_sweep_then_all_removed_with_streak(self):
        g = game_from_rows(SCENARIO)
        self.assertEqual(sweep(g), Updates.REMOVE)
        self.assertEqual(g.removed, 4)
        self.assertEqual(g.seq, 4)
        self.assertEqual(g.max_seq, 4)
        self.assertEqual(g.score, 10)
        self.assertEqual(g.moves, 4)
        self.assertTrue(g.is_cleared())

    def test_given_chain_when_sweep_then_cells_freed_earlier_in_pass_are_used(self):
        g = game_from_rows([
            '.....',
            '.^...',
            '.^...',
            '.....',
        ])
        sweep(g)
        # (1,1) leaves first, then (1,2) finds the column clear
        self.assertTrue(g.is_cleared())
        self.assertEqual(g.score, 3)

    def test_given_partial_progress_when_sweep_then_streak_reset_between_sweeps(self):
        g = game_from_rows(['.....', '.><^.', '.....'])
        self.assertEqual(sweep(g), Updates.REMOVE)
        self.assertEqual(g.count, 2)
        self.assertEqual(g.seq, 0)
        self.assertEqual(g.max_seq, 1)
        self.assertEqual(g.score, 1)

    def test_given_stuck_board_when_sweep_then_none_and_no_mutation(self):
        g = game_from_rows(['....', '.><.', '....'])
        g.seq = 2
        self.assertEqual(sweep(g), Updates.NONE)
        self.assertEqual(g.count, 2)
        self.assertEqual(g.seq, 2)
        self.assertEqual(g.stack, [])


class TestAutoplay(unittest.TestCase):
    def test_given_scenario_when_autoplay_then_won_in_one_turn(self):
        g = game_from_rows(SCENARIO)
        res = autoplay(g)
        self.assertTrue(res.won)
        self.assertEqual((res.turns, res.shuffles), (1, 0))
        self.assertTrue(g.completed)

    def test_given_stuck_board_when_autoplay_then_shuffles(self):
        g = game_from_rows(['....', '.><.', '....'])
        res = autoplay(g, ShuffleMode.RANDOM, max_turns=200)
        self.assertGreaterEqual(res.shuffles, 1)
        self.assertEqual(res.won, g.is_cleared())
        self.assertEqual(g.count + g.removed, 2)

    def test_given_dealt_board_when_autoplay_then_invariants_hold(self):
        g = Game(seed=21)
        g.setup(8, 8)
        res = autoplay(g, max_turns=2000)
        self.assertLessEqual(res.turns, 2000)
        self.assertEqual(res.won, g.is_cleared())
        self.assertEqual(res.won, g.completed)
        self.assertEqual(g.count + g.removed, 36)

    def test_given_debug_env_when_autoplay_then_progress_printed(self):
        g = game_from_rows(SCENARIO)
        buf = io.StringIO()
        with patch.dict(os.environ, {"ARROWS_DEBUG": "1"}), redirect_stdout(buf):
            autoplay(g)
        self.assertIn("[autoplay] turn=1 removed=4", buf.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
