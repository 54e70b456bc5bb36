from __future__ import annotations

import unittest

from tictacchec.engine.board import Board
from tictacchec.engine.types import Color
from tictacchec.strategy.evaluation import evaluate


class EvaluationTests(unittest.TestCase):
    def test_empty_board_scores_zero(self) -> None:
        self.assertEqual(evaluate(Board.empty(), Color.WHITE), 0.0)

    def test_single_corner_piece(self) -> None:
        board = Board.from_rows(["R...", "....", "....", "...."])
        # row 0, column 0 and the main diagonal
        self.assertEqual(evaluate(board, Color.WHITE), 9.0)
        self.assertEqual(evaluate(board, Color.BLACK), -6.0)

    def test_centre_bonus(self) -> None:
        board = Board.from_rows(["....", ".R..", "....", "...."])
        self.assertEqual(evaluate(board, Color.WHITE), 14.0)
        self.assertEqual(evaluate(board, Color.BLACK), -11.0)

    def test_mixed_lines_are_ignored(self) -> None:
        board = Board.from_rows(["Rn..", "....", "....", "...."])
        # column 0 +3, main diagonal +3, column 1 -2, row 0 mixed
        self.assertEqual(evaluate(board, Color.WHITE), 4.0)

    def test_three_in_a_row(self) -> None:
        board = Board.from_rows(["RBN.", "....", "....", "...."])
        # row 0 +200, three columns +3 each, main diagonal +3
        self.assertEqual(evaluate(board, Color.WHITE), 212.0)
        self.assertEqual(evaluate(board, Color.BLACK), -150.0 - 6.0 - 2.0)

    def test_full_line_weight_is_kept(self) -> None:
        board = Board.from_rows(["RBNP", "....", "....", "...."])
        # row 0 +10000, four columns +3, both diagonals +3
        self.assertEqual(evaluate(board, Color.WHITE), 10000.0 + 12.0 + 6.0)

    def test_two_pieces_in_line(self) -> None:
        board = Board.from_rows(["....", "....", "....", "p..b"])
        # row 3 -15, columns 0 and 3 -2 each, both diagonals -2 each
        self.assertEqual(evaluate(board, Color.WHITE), -15.0 - 4.0 - 4.0)
        self.assertEqual(evaluate(board, Color.BLACK), 20.0 + 6.0 + 6.0)


if __name__ == "__main__":
    unittest.main()
