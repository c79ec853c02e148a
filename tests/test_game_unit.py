import random
import unittest

from game import (
    Board,
    Dir,
    ShuffleMode,
    collect_slide,
    has_opposite_neighbor,
    parse_shuffle_mode,
    rotate_left,
    rotate_right,
    shuffle_dir,
    simplify,
)


class TestBoardAndMoves(unittest.TestCase):
    def test_given_rows_when_building_board_then_cells_and_border_helpers_correct(self):
        board = Board.from_rows([
            '.....',
            '.^>v.',
            '.<..^',
            '.....',
        ])
        self.assertEqual(board.width, 5)
        self.assertEqual(board.height, 4)
        self.assertEqual(board.at(1, 1), Dir.UP)
        self.assertEqual(board.at(3, 1), Dir.DOWN)
        self.assertEqual(board.at(1, 2), Dir.LEFT)
        self.assertTrue(board.is_interior(1, 1))
        self.assertFalse(board.is_interior(0, 1))
        self.assertFalse(board.is_interior(4, 2))
        self.assertFalse(board.in_bounds(5, 0))
        self.assertEqual(list(board.interior()), [(1, 1), (2, 1), (3, 1), (1, 2), (2, 2), (3, 2)])
        self.assertEqual(board.count_arrows(), 5)

    def test_given_board_when_pretty_then_glyphs_and_cursor_rendered(self):
        board = Board.from_rows(['....', '.>^.', '....'])
        txt = board.pretty((1, 1))
        self.assertIn('[>]', txt)
        self.assertIn(' ^ ', txt)
        self.assertEqual(len(txt.splitlines()), 3)

    def test_given_directions_when_rotating_then_cycles_match(self):
        self.assertEqual(rotate_left(Dir.UP), Dir.LEFT)
        self.assertEqual(rotate_left(Dir.LEFT), Dir.DOWN)
        self.assertEqual(rotate_left(Dir.DOWN), Dir.RIGHT)
        self.assertEqual(rotate_left(Dir.RIGHT), Dir.UP)
        for d in (Dir.UP, Dir.DOWN, Dir.LEFT, Dir.RIGHT):
            self.assertEqual(rotate_right(rotate_left(d)), d)
        self.assertEqual(rotate_left(Dir.EMPTY), Dir.EMPTY)

    def test_given_text_when_parsing_shuffle_mode_then_expected_modes(self):
        self.assertIs(parse_shuffle_mode('l'), ShuffleMode.LEFT)
        self.assertIs(parse_shuffle_mode('Left'), ShuffleMode.LEFT)
        self.assertIs(parse_shuffle_mode('r'), ShuffleMode.RIGHT)
        self.assertIs(parse_shuffle_mode('right'), ShuffleMode.RIGHT)
        self.assertIs(parse_shuffle_mode('random'), ShuffleMode.RANDOM)
        self.assertIs(parse_shuffle_mode(None), ShuffleMode.RANDOM)

    def test_given_random_mode_when_shuffling_cell_then_direction_always_changes(self):
        rng = random.Random(7)
        for d in (Dir.UP, Dir.DOWN, Dir.LEFT, Dir.RIGHT):
            for _ in range(20):
                self.assertNotEqual(shuffle_dir(d, ShuffleMode.RANDOM, rng), d)
        self.assertEqual(shuffle_dir(Dir.EMPTY, ShuffleMode.RANDOM, rng), Dir.EMPTY)

    def test_given_arrow_with_clear_path_when_collecting_slide_then_removal(self):
        board = Board.from_rows(['.....', '.>>..', '.....'])
        slide = collect_slide(board, 1, 1)
        assert slide is not None
        self.assertTrue(slide.removal)
        self.assertEqual([(c.x, c.y) for c in slide.cells], [(1, 1), (2, 1)])
        self.assertEqual([(c.x, c.y) for c in slide.empty], [(3, 1), (4, 1)])

    def test_given_arrow_stopped_by_other_arrow_when_collecting_slide_then_partial(self):
        board = Board.from_rows(['.......', '.>..<..', '.......'])
        slide = collect_slide(board, 1, 1)
        assert slide is not None
        self.assertFalse(slide.removal)
        self.assertEqual(len(slide.cells), 1)
        self.assertEqual([(c.x, c.y) for c in slide.empty], [(2, 1), (3, 1)])

    def test_given_blocked_or_empty_cell_when_collecting_slide_then_none(self):
        board = Board.from_rows(['.....', '.><..', '.....'])
        self.assertIsNone(collect_slide(board, 1, 1))
        self.assertIsNone(collect_slide(board, 2, 1))
        self.assertIsNone(collect_slide(board, 3, 1))

    def test_given_opposite_neighbours_when_simplify_then_later_cell_rotated(self):
        board = Board.from_rows(['....', '.><.', '....'])
        self.assertTrue(has_opposite_neighbor(board, 1, 1, Dir.RIGHT))
        simplify(board)
        # (1,1) faces its neighbour and rotates first: Right -> Up
        self.assertEqual(board.at(1, 1), Dir.UP)
        self.assertEqual(board.at(2, 1), Dir.LEFT)
        self.assertFalse(has_opposite_neighbor(board, 1, 1, board.at(1, 1)))
        self.assertFalse(has_opposite_neighbor(board, 2, 1, board.at(2, 1)))

    def test_given_cell_surrounded_by_all_directions_when_simplify_then_attempts_are_bounded(self):
        # Centre arrow has an opposite neighbour whatever way it points.
        board = Board.from_rows([
            '.....',
            '..^..',
            '.<^>.',
            '..v..',
            '.....',
        ])
        simplify(board)
        # Centre tried every rotation and settled back on its original direction.
        self.assertEqual(board.at(2, 2), Dir.UP)
        self.assertEqual(board.at(2, 1), Dir.UP)
        self.assertEqual(board.at(1, 2), Dir.LEFT)
        self.assertEqual(board.at(3, 2), Dir.RIGHT)
        # The cell below is visited later and turns away from the centre.
        self.assertEqual(board.at(2, 3), Dir.RIGHT)


if __name__ == '__main__':
    unittest.main(verbosity=2)
