import unittest
from game import (
    Board,
    EMPTY,
    PLAYER_X,
    PLAYER_O,
    WINNING_LINES,
    GameStatus,
    InvalidCellError,
    check_index,
    other_player,
    winning_line,
    is_full,
    open_cells,
    evaluate,
    status_message,
)


class TestGameUnit(unittest.TestCase):
    def _mk_grid(self, rows):
        flat = []
        for r in rows:
            assert len(r) == 3
            flat.extend('' if c == '.' else c for c in r)
        return tuple(flat)

    def test_given_board_when_accessing_cells_then_row_major_indices(self):
        board = Board(grid=self._mk_grid([
            ['X', '.', 'O'],
            ['.', 'X', '.'],
            ['O', '.', '.'],
        ]))
        self.assertEqual(board.index(1, 2), 5)
        self.assertEqual(board.index(2, 0), 6)
        self.assertEqual(board.at(0, 2), 'O')
        self.assertEqual(board.at(1, 1), 'X')
        self.assertEqual(list(board.coords())[3], (1, 0))
        for r, c in ((3, 0), (0, -1), (2, 3)):
            with self.assertRaises(InvalidCellError):
                board.index(r, c)
        with self.assertRaises(InvalidCellError):
            board.at(-1, 1)

    def test_given_board_when_pretty_then_marks_and_dots_rendered(self):
        board = Board(grid=self._mk_grid([
            ['X', '.', 'O'],
            ['.', 'X', '.'],
            ['.', '.', '.'],
        ]))
        self.assertEqual(board.pretty(), "X . O\n. X .\n. . .")
        self.assertEqual(Board.empty().grid, (EMPTY,) * 9)

    def test_given_index_when_checking_then_only_0_to_8_accepted(self):
        for i in range(9):
            self.assertEqual(check_index(i), i)
        for bad in (-1, 9, 100, '3', 1.0, None, True):
            with self.assertRaises(InvalidCellError):
                check_index(bad)
        # Contract violations are ValueErrors
        self.assertTrue(issubclass(InvalidCellError, ValueError))

    def test_given_players_when_flipping_then_alternate(self):
        self.assertEqual(other_player(PLAYER_X), PLAYER_O)
        self.assertEqual(other_player(PLAYER_O), PLAYER_X)

    def test_given_eight_lines_when_listed_then_rows_columns_diagonals(self):
        self.assertEqual(len(WINNING_LINES), 8)
        self.assertEqual(len(set(WINNING_LINES)), 8)
        self.assertIn((0, 4, 8), WINNING_LINES)
        self.assertIn((2, 4, 6), WINNING_LINES)

    def test_given_each_line_filled_when_scanning_then_that_line_found(self):
        for line in WINNING_LINES:
            grid = [EMPTY] * 9
            for i in line:
                grid[i] = PLAYER_O
            self.assertEqual(winning_line(grid), line)

    def test_given_mixed_or_empty_line_when_scanning_then_no_win(self):
        self.assertIsNone(winning_line((EMPTY,) * 9))
        grid = self._mk_grid([
            ['X', 'X', 'O'],
            ['.', '.', '.'],
            ['.', '.', '.'],
        ])
        self.assertIsNone(winning_line(grid))

    def test_given_two_lines_when_scanning_then_first_in_order_returned(self):
        grid = self._mk_grid([
            ['X', 'X', 'X'],
            ['X', 'O', 'O'],
            ['X', 'O', 'O'],
        ])
        self.assertEqual(winning_line(grid), (0, 1, 2))

    def test_given_full_board_with_line_when_evaluating_then_won_not_draw(self):
        grid = self._mk_grid([
            ['X', 'O', 'X'],
            ['O', 'X', 'O'],
            ['O', 'X', 'X'],
        ])
        self.assertTrue(is_full(grid))
        status = evaluate(grid)
        self.assertEqual(status.kind, 'won')
        self.assertEqual(status.winner, 'X')
        self.assertEqual(status.line, (0, 4, 8))

    def test_given_full_board_without_line_when_evaluating_then_draw(self):
        grid = self._mk_grid([
            ['X', 'O', 'X'],
            ['X', 'O', 'O'],
            ['O', 'X', 'X'],
        ])
        status = evaluate(grid)
        self.assertEqual(status.kind, 'draw')
        self.assertIsNone(status.winner)
        self.assertTrue(status.is_terminal)

    def test_given_partial_board_when_evaluating_then_in_progress_and_open_cells(self):
        grid = self._mk_grid([
            ['X', '.', '.'],
            ['.', 'O', '.'],
            ['.', '.', 'X'],
        ])
        self.assertFalse(is_full(grid))
        self.assertEqual(evaluate(grid).kind, 'in_progress')
        self.assertFalse(evaluate(grid).is_terminal)
        self.assertEqual(open_cells(grid), [1, 2, 3, 5, 6, 7])

    def test_given_status_when_formatting_then_player_facing_text(self):
        self.assertEqual(status_message(GameStatus('won', winner='X', line=(0, 1, 2))), "Player X won!")
        self.assertEqual(status_message(GameStatus('won', winner='O', line=(2, 4, 6))), "Player O won!")
        self.assertEqual(status_message(GameStatus('draw')), "Draw!")
        self.assertEqual(status_message(GameStatus('in_progress')), "")


if __name__ == '__main__':
    unittest.main(verbosity=2)
