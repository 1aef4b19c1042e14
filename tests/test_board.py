import unittest

from tetris_board import clear, collide, create_board, merge, sweep
from tetris_piece import PIECES, create_piece, width

from tests.helpers import fill_rows, player_at


class CollideTests(unittest.TestCase):
    def setUp(self):
        self.board = create_board(12, 20)

    def test_empty_board_free_at_every_spawn(self):
        for t in PIECES:
            shape = create_piece(t)
            p = player_at(shape, 12 // 2 - width(shape) // 2, 0)
            self.assertFalse(collide(self.board, p), t)

    def test_side_walls_collide(self):
        # T's middle row spans all three columns
        self.assertTrue(collide(self.board, player_at(create_piece("T"), -1, 0)))
        self.assertTrue(collide(self.board, player_at(create_piece("T"), 10, 0)))
        self.assertFalse(collide(self.board, player_at(create_piece("T"), 9, 0)))

    def test_empty_shape_columns_may_hang_past_wall(self):
        # vertical I only occupies local column 1
        self.assertFalse(collide(self.board, player_at(create_piece("I"), -1, 0)))
        self.assertTrue(collide(self.board, player_at(create_piece("I"), -2, 0)))

    def test_floor_collides(self):
        self.assertFalse(collide(self.board, player_at(create_piece("T"), 4, 17)))
        self.assertTrue(collide(self.board, player_at(create_piece("T"), 4, 18)))

    def test_rows_above_board_are_free(self):
        self.assertFalse(collide(self.board, player_at(create_piece("I"), 4, -3)))
        self.assertFalse(collide(self.board, player_at(create_piece("I"), 4, -10)))

    def test_locked_cell_collides(self):
        self.board[1][5] = 3
        self.assertTrue(collide(self.board, player_at(create_piece("T"), 4, 0)))
        # only the empty corner of the shape sits over it
        self.assertFalse(collide(self.board, player_at(create_piece("T"), 5, -1)))


class MergeTests(unittest.TestCase):
    def test_merge_writes_colour_ids(self):
        board = create_board(12, 20)
        shape = create_piece("Z")
        merge(board, player_at(shape, 3, 10))
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                self.assertEqual(board[10 + y][3 + x], v)
        self.assertEqual(sum(1 for row in board for v in row if v), 4)

    def test_merge_keeps_cells_under_empty_blocks(self):
        board = create_board(12, 20)
        board[10][3] = 4
        merge(board, player_at(create_piece("T"), 3, 10))
        self.assertEqual(board[10][3], 4)
        self.assertEqual(board[11][3:6], [1, 1, 1])

    def test_merge_skips_rows_above_board(self):
        board = create_board(12, 20)
        merge(board, player_at(create_piece("I"), 0, -2))
        self.assertEqual([board[y][1] for y in range(3)], [5, 5, 0])


class SweepTests(unittest.TestCase):
    def setUp(self):
        self.board = create_board(12, 20)

    def test_single_full_row(self):
        fill_rows(self.board, [19])
        self.board[18][0] = 2
        self.assertEqual(sweep(self.board), 1)
        self.assertEqual(self.board[0], [0] * 12)
        self.assertEqual(self.board[19], [2] + [0] * 11)
        self.assertEqual(len(self.board), 20)

    def test_adjacent_full_rows_clear_in_one_call(self):
        fill_rows(self.board, [17, 18, 19])
        self.board[16][4] = 6
        self.assertEqual(sweep(self.board), 3)
        self.assertEqual(self.board[19][4], 6)
        self.assertEqual(sum(1 for row in self.board for v in row if v), 1)

    def test_separated_full_rows(self):
        fill_rows(self.board, [10, 19])
        fill_rows(self.board, [15], hole=0)
        self.assertEqual(sweep(self.board), 2)
        self.assertEqual(self.board[16], [0] + [1] * 11)
        self.assertEqual(sum(1 for row in self.board for v in row if v), 11)

    def test_row_zero_never_cleared(self):
        fill_rows(self.board, [0])
        self.assertEqual(sweep(self.board), 0)
        self.assertEqual(self.board[0], [1] * 12)

    def test_partial_rows_untouched(self):
        fill_rows(self.board, [19], hole=11)
        self.assertEqual(sweep(self.board), 0)
        self.assertEqual(self.board[19][11], 0)


class ClearTests(unittest.TestCase):
    def test_clear_zeroes_in_place(self):
        board = create_board(12, 20)
        fill_rows(board, range(20))
        rows = list(board)
        clear(board)
        self.assertEqual(board, create_board(12, 20))
        self.assertTrue(all(a is b for a, b in zip(rows, board)))


if __name__ == "__main__":
    unittest.main()
