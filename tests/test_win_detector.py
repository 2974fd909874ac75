import random
import unittest

from c4engine.game.board import Board
from c4engine.game.win_detector import check_win, is_winning_move
from c4engine.utils import ROWS, COLS, Direction, Player


def place(board, cells, player):
    """Write pieces straight into the grid, bypassing gravity."""
    for row, col in cells:
        board.grid[row, col] = player.value


def has_line_through(board, row, col, player):
    """Brute force: any four-cell window through (row, col) owned by player."""
    for direction in Direction:
        dr, dc = direction.value
        for offset in range(4):
            cells = [(row + (i - offset) * dr, col + (i - offset) * dc) for i in range(4)]
            if all(0 <= r < board.rows and 0 <= c < board.cols
                   and board.grid[r, c] == player.value for r, c in cells):
                return True
    return False


class TestCheckWin(unittest.TestCase):
    def setUp(self):
        self.board = Board()

    def test_vertical_four_from_the_bottom(self):
        for _ in range(3):
            self.board.drop(0, Player.FIRST)
        row = self.board.drop(0, Player.FIRST)
        self.assertEqual(row, 2)
        self.assertEqual(check_win(self.board, row, 0, Player.FIRST),
                         [(5, 0), (4, 0), (3, 0), (2, 0)])

    def test_horizontal_completed_at_the_end(self):
        for col in range(3):
            self.board.drop(col, Player.FIRST)
        row = self.board.drop(3, Player.FIRST)
        self.assertEqual(check_win(self.board, row, 3, Player.FIRST),
                         [(5, 3), (5, 2), (5, 1), (5, 0)])

    def test_horizontal_completed_in_the_middle(self):
        for col in (0, 1, 3, 4):
            self.board.drop(col, Player.SECOND)
        row = self.board.drop(2, Player.SECOND)
        line = check_win(self.board, row, 2, Player.SECOND)
        self.assertEqual(line, [(5, 4), (5, 3), (5, 2), (5, 1)])

    def test_diagonal(self):
        place(self.board, [(2, 0), (3, 1), (4, 2), (5, 3)], Player.FIRST)
        self.assertEqual(check_win(self.board, 5, 3, Player.FIRST),
                         [(5, 3), (4, 2), (3, 1), (2, 0)])
        self.assertEqual(check_win(self.board, 3, 1, Player.FIRST),
                         [(5, 3), (4, 2), (3, 1), (2, 0)])

    def test_anti_diagonal(self):
        place(self.board, [(2, 3), (3, 2), (4, 1), (5, 0)], Player.SECOND)
        self.assertEqual(check_win(self.board, 2, 3, Player.SECOND),
                         [(5, 0), (4, 1), (3, 2), (2, 3)])

    def test_three_in_a_row_is_not_a_win(self):
        place(self.board, [(5, 0), (5, 1), (5, 2)], Player.FIRST)
        self.assertIsNone(check_win(self.board, 5, 2, Player.FIRST))

    def test_broken_line_is_not_a_win(self):
        place(self.board, [(5, 0), (5, 1), (5, 3), (5, 4)], Player.FIRST)
        place(self.board, [(5, 2)], Player.SECOND)
        self.assertIsNone(check_win(self.board, 5, 3, Player.FIRST))
        self.assertIsNone(check_win(self.board, 5, 2, Player.SECOND))

    def test_wrong_player_is_not_a_win(self):
        place(self.board, [(5, 0), (5, 1), (5, 2), (5, 3)], Player.FIRST)
        self.assertIsNone(check_win(self.board, 5, 3, Player.SECOND))

    def test_horizontal_checked_before_vertical(self):
        place(self.board, [(5, 0), (4, 0), (3, 0)], Player.FIRST)
        place(self.board, [(5, 1), (4, 1), (5, 2), (4, 2), (5, 3), (4, 3), (3, 1), (3, 2)], Player.SECOND)
        place(self.board, [(2, 1), (2, 2), (2, 3)], Player.FIRST)
        place(self.board, [(3, 3)], Player.SECOND)
        place(self.board, [(2, 0)], Player.FIRST)
        self.assertEqual(check_win(self.board, 2, 0, Player.FIRST),
                         [(2, 3), (2, 2), (2, 1), (2, 0)])

    def test_long_run_returns_four_cells(self):
        place(self.board, [(5, c) for c in range(7)], Player.FIRST)
        line = check_win(self.board, 5, 3, Player.FIRST)
        self.assertEqual(line, [(5, 6), (5, 5), (5, 4), (5, 3)])

    def test_is_winning_move(self):
        self.assertFalse(is_winning_move(self.board, 5, 0))
        place(self.board, [(5, 0), (4, 0), (3, 0), (2, 0)], Player.SECOND)
        self.assertTrue(is_winning_move(self.board, 2, 0))

    def test_agrees_with_brute_force_on_random_games(self):
        rng = random.Random(42)
        checked = 0
        for _ in range(200):
            board = Board()
            player = Player.FIRST
            while board.get_valid_moves():
                column = rng.choice(board.get_valid_moves())
                row = board.drop(column, player)
                line = check_win(board, row, column, player)
                self.assertEqual(line is not None, has_line_through(board, row, column, player))
                checked += 1
                if line is not None:
                    self.assertEqual(len(line), 4)
                    self.assertIn((row, column), line)
                    for r, c in line:
                        self.assertEqual(board.cell(r, c), player)
                    steps = {(b[0] - a[0], b[1] - a[1]) for a, b in zip(line, line[1:])}
                    self.assertEqual(len(steps), 1)
                    dr, dc = steps.pop()
                    self.assertLessEqual(max(abs(dr), abs(dc)), 1)
                    break
                player = player.other()
        self.assertGreater(checked, 200)


if __name__ == '__main__':
    unittest.main()
