import unittest

from game import Board, BoardFull, Direction, InvalidConfiguration, make_rnd, neighbor


def scripted(*values):
    """Random-index provider that returns the given draws in order."""
    queue = list(values)

    def rnd(max_value):
        if not queue:
            raise AssertionError('random provider exhausted')
        v = queue.pop(0)
        assert 0 <= v < max_value, (v, max_value)
        rnd.calls += 1
        return v

    rnd.calls = 0
    return rnd


OPPOSITE_PAIRS = [
    (Direction.UP, Direction.DOWN),
    (Direction.DOWN, Direction.UP),
    (Direction.LEFT, Direction.RIGHT),
    (Direction.RIGHT, Direction.LEFT),
]


class TestBoardGeometry(unittest.TestCase):
    def test_given_widths_when_constructing_then_size_is_width_squared(self):
        for w in range(1, 8):
            self.assertEqual(Board(w, scripted()).size, w * w)

    def test_given_bad_widths_when_constructing_then_invalid_configuration(self):
        for w in (0, -3, True, 2.5, '4', None):
            with self.assertRaises(InvalidConfiguration):
                Board(w, scripted())
        # InvalidConfiguration is also a ValueError
        with self.assertRaises(ValueError):
            Board(0, scripted())

    def test_given_any_index_when_moving_then_back_then_identity(self):
        for w in range(1, 7):
            size = w * w
            for idx in range(size):
                for d, back in OPPOSITE_PAIRS:
                    nxt = neighbor(idx, w, size, d)
                    self.assertTrue(0 <= nxt < size)
                    self.assertEqual(neighbor(nxt, w, size, back), idx, (w, idx, d))

    def test_given_every_cell_when_listing_neighbors_then_four_regular_on_large_boards(self):
        w, size = 5, 25
        for idx in range(size):
            cells = {neighbor(idx, w, size, d) for d in Direction}
            self.assertEqual(len(cells), 4)
            self.assertNotIn(idx, cells)

    def test_given_top_left_corner_when_wrapping_then_expected_cells(self):
        w, size = 4, 16
        self.assertEqual(neighbor(0, w, size, Direction.UP), 12)
        self.assertEqual(neighbor(0, w, size, Direction.LEFT), 3)
        self.assertEqual(neighbor(0, w, size, Direction.DOWN), 4)
        self.assertEqual(neighbor(0, w, size, Direction.RIGHT), 1)

    def test_given_top_right_corner_when_wrapping_then_expected_cells(self):
        w, size = 4, 16
        self.assertEqual(neighbor(3, w, size, Direction.UP), 15)
        self.assertEqual(neighbor(3, w, size, Direction.RIGHT), 0)
        self.assertEqual(neighbor(3, w, size, Direction.LEFT), 2)
        self.assertEqual(neighbor(3, w, size, Direction.DOWN), 7)

    def test_given_bottom_left_corner_when_wrapping_then_expected_cells(self):
        w, size = 4, 16
        self.assertEqual(neighbor(12, w, size, Direction.DOWN), 0)
        self.assertEqual(neighbor(12, w, size, Direction.LEFT), 15)
        self.assertEqual(neighbor(12, w, size, Direction.UP), 8)
        self.assertEqual(neighbor(12, w, size, Direction.RIGHT), 13)

    def test_given_bottom_right_corner_when_wrapping_then_expected_cells(self):
        w, size = 4, 16
        self.assertEqual(neighbor(15, w, size, Direction.DOWN), 3)
        self.assertEqual(neighbor(15, w, size, Direction.RIGHT), 12)
        self.assertEqual(neighbor(15, w, size, Direction.UP), 11)
        self.assertEqual(neighbor(15, w, size, Direction.LEFT), 14)

    def test_given_row_edges_when_moving_sideways_then_row_is_kept(self):
        w, size = 5, 25
        for r in range(w):
            start, end = r * w, r * w + w - 1
            self.assertEqual(neighbor(start, w, size, Direction.LEFT), end)
            self.assertEqual(neighbor(end, w, size, Direction.RIGHT), start)


class TestFoodPlacement(unittest.TestCase):
    def test_given_new_board_when_no_food_placed_then_food_cell_unset(self):
        self.assertIsNone(Board(3, scripted()).food_cell)

    def test_given_occupied_draws_when_placing_food_then_redraws_until_free(self):
        rnd = scripted(3, 4, 5, 7)
        board = Board(4, rnd)
        cell = board.place_food({3, 4, 5})
        self.assertEqual(cell, 7)
        self.assertEqual(board.food_cell, 7)
        self.assertEqual(rnd.calls, 4)

    def test_given_list_of_body_cells_when_placing_food_then_accepted(self):
        board = Board(3, scripted(0, 8))
        self.assertEqual(board.place_food([0, 1, 2]), 8)

    def test_given_full_board_when_placing_food_then_board_full_without_drawing(self):
        rnd = scripted()
        board = Board(2, rnd)
        with self.assertRaises(BoardFull):
            board.place_food([0, 1, 2, 3])
        self.assertEqual(rnd.calls, 0)
        self.assertIsNone(board.food_cell)

    def test_given_one_free_cell_when_placing_food_then_it_is_chosen(self):
        board = Board(2, scripted(0, 1, 2, 1, 3))
        self.assertEqual(board.place_food([0, 1, 2]), 3)


class TestRandomProvider(unittest.TestCase):
    def test_given_same_seed_when_drawing_then_same_sequence(self):
        a, b = make_rnd(5), make_rnd(5)
        self.assertEqual([a(16) for _ in range(20)], [b(16) for _ in range(20)])

    def test_given_bound_when_drawing_then_in_range(self):
        rnd = make_rnd(1)
        self.assertTrue(all(0 <= rnd(3) < 3 for _ in range(200)))

    def test_given_non_positive_bound_when_drawing_then_value_error(self):
        rnd = make_rnd(1)
        for bound in (0, -2):
            with self.assertRaises(ValueError):
                rnd(bound)


class TestPretty(unittest.TestCase):
    def test_given_snake_and_food_when_pretty_then_symbols_rendered(self):
        board = Board(3, scripted(8))
        board.place_food([4, 3])
        txt = board.pretty([4, 3])
        self.assertEqual(txt, '. . .\no H .\n. . *')

    def test_given_no_food_when_pretty_then_only_empty_cells(self):
        txt = Board(2, scripted()).pretty()
        self.assertEqual(txt, '. .\n. .')


if __name__ == '__main__':
    unittest.main()
