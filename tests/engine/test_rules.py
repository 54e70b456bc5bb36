from __future__ import annotations

import random
import unittest

from tictacchec.engine.board import Board
from tictacchec.engine.piece import Piece, starting_reserve
from tictacchec.engine.rules import legal_destinations
from tictacchec.engine.types import Color, Phase, PieceType, Position


def P(row: int, col: int) -> Position:
    return Position(row, col)


def random_board(rng: random.Random) -> Board:
    """Scatter a random subset of all eight pieces over the board."""
    board = Board.empty()
    pieces = starting_reserve(Color.WHITE) + starting_reserve(Color.BLACK)
    cells = [P(r, c) for r in range(4) for c in range(4)]
    rng.shuffle(cells)
    for piece, cell in zip(pieces, cells):
        if rng.random() < 0.7:
            board.place(cell, piece)
    return board


def path_between(origin: Position, dest: Position) -> list[Position]:
    d_row = (dest.row > origin.row) - (dest.row < origin.row)
    d_col = (dest.col > origin.col) - (dest.col < origin.col)
    out = []
    cur = origin.offset(d_row, d_col)
    while cur != dest:
        out.append(cur)
        cur = cur.offset(d_row, d_col)
    return out


class PlacementRuleTests(unittest.TestCase):
    def test_placement_after_first_rook_offers_remaining_cells(self) -> None:
        board = Board.empty()
        board.place(P(1, 1), Piece(PieceType.ROOK, Color.WHITE))
        expected = {P(r, c) for r in range(4) for c in range(4)} - {P(1, 1)}
        for piece in starting_reserve(Color.WHITE)[1:] + starting_reserve(Color.BLACK):
            dests = legal_destinations(piece, None, board, Phase.PLACEMENT)
            self.assertEqual(len(dests), 15)
            self.assertEqual(set(dests), expected)

    def test_placement_ignores_phase_and_type(self) -> None:
        board = Board.from_rows(["R.b.", ".N..", "..p.", "...."])
        pawn = Piece(PieceType.PAWN, Color.WHITE)
        self.assertEqual(
            legal_destinations(pawn, None, board, Phase.MOVEMENT),
            board.empty_positions(),
        )


class MovementRuleTests(unittest.TestCase):
    def test_rook_blocked_by_own_piece(self) -> None:
        board = Board.from_rows(["R.Pb", "....", "....", "...."])
        rook = board.piece_at(P(0, 0))
        dests = legal_destinations(rook, P(0, 0), board, Phase.MOVEMENT)
        self.assertEqual({d for d in dests if d.row == 0}, {P(0, 1)})
        self.assertEqual({d for d in dests if d.col == 0}, {P(1, 0), P(2, 0), P(3, 0)})

    def test_rook_captures_and_stops(self) -> None:
        board = Board.from_rows(["R.n.", "....", "p...", "...."])
        rook = board.piece_at(P(0, 0))
        dests = set(legal_destinations(rook, P(0, 0), board, Phase.MOVEMENT))
        self.assertEqual(dests, {P(0, 1), P(0, 2), P(1, 0), P(2, 0)})

    def test_movement_rules_apply_during_placement_phase(self) -> None:
        board = Board.from_rows(["R.Pb", "....", "....", "...."])
        rook = board.piece_at(P(0, 0))
        self.assertEqual(
            legal_destinations(rook, P(0, 0), board, Phase.PLACEMENT),
            legal_destinations(rook, P(0, 0), board, Phase.MOVEMENT),
        )

    def test_bishop_slides_diagonally(self) -> None:
        board = Board.from_rows(["....", ".B..", "....", "...p"])
        bishop = board.piece_at(P(1, 1))
        dests = set(legal_destinations(bishop, P(1, 1), board, Phase.MOVEMENT))
        self.assertEqual(dests, {P(0, 0), P(0, 2), P(2, 0), P(2, 2), P(3, 3)})

    def test_bishop_cannot_jump(self) -> None:
        board = Board.from_rows(["B...", ".N..", "....", "...b"])
        bishop = board.piece_at(P(0, 0))
        self.assertEqual(legal_destinations(bishop, P(0, 0), board, Phase.MOVEMENT), [])

    def test_knight_jumps_and_avoids_own_pieces(self) -> None:
        board = Board.from_rows(["N...", "..R.", ".b..", "...."])
        knight = board.piece_at(P(0, 0))
        dests = legal_destinations(knight, P(0, 0), board, Phase.MOVEMENT)
        self.assertEqual(dests, [P(2, 1)])

    def test_knight_from_centre(self) -> None:
        board = Board.from_rows(["....", ".N..", "....", "...."])
        knight = board.piece_at(P(1, 1))
        dests = set(legal_destinations(knight, P(1, 1), board, Phase.MOVEMENT))
        self.assertEqual(dests, {P(3, 0), P(3, 2), P(0, 3), P(2, 3)})

    def test_black_pawn_steps_and_captures_forward(self) -> None:
        board = Board.from_rows(["....", "....", ".p..", "R.B."])
        pawn = board.piece_at(P(2, 1))
        dests = set(legal_destinations(pawn, P(2, 1), board, Phase.MOVEMENT))
        self.assertEqual(dests, {P(3, 1), P(3, 0), P(3, 2)})

    def test_white_pawn_moves_up_and_never_diagonally_onto_empty(self) -> None:
        board = Board.from_rows(["....", "....", ".P..", "...."])
        pawn = board.piece_at(P(2, 1))
        self.assertEqual(legal_destinations(pawn, P(2, 1), board, Phase.MOVEMENT), [P(1, 1)])

    def test_pawn_blocked_ahead_even_by_opponent(self) -> None:
        board = Board.from_rows(["....", ".r..", ".P..", "...."])
        pawn = board.piece_at(P(2, 1))
        self.assertEqual(legal_destinations(pawn, P(2, 1), board, Phase.MOVEMENT), [])

    def test_pawn_on_far_edge_has_no_moves(self) -> None:
        board = Board.from_rows([".P..", "....", "....", "..p."])
        self.assertEqual(
            legal_destinations(board.piece_at(P(0, 1)), P(0, 1), board, Phase.MOVEMENT), []
        )
        self.assertEqual(
            legal_destinations(board.piece_at(P(3, 2)), P(3, 2), board, Phase.MOVEMENT), []
        )


class MovementPropertyTests(unittest.TestCase):
    def test_random_boards_respect_sliding_and_ownership(self) -> None:
        rng = random.Random(1234)
        for _ in range(300):
            board = random_board(rng)
            for origin, piece in board.occupied():
                dests = legal_destinations(piece, origin, board, Phase.MOVEMENT)
                self.assertEqual(len(dests), len(set(dests)))
                for dest in dests:
                    self.assertTrue(Board.in_bounds(dest.row, dest.col))
                    self.assertNotEqual(dest, origin)
                    occupant = board.piece_at(dest)
                    if occupant is not None:
                        self.assertIsNot(occupant.owner, piece.owner)
                    if piece.kind in (PieceType.ROOK, PieceType.BISHOP):
                        for step in path_between(origin, dest):
                            self.assertTrue(board.is_empty(step))

    def test_placement_equals_empty_cells_on_random_boards(self) -> None:
        rng = random.Random(99)
        piece = Piece(PieceType.KNIGHT, Color.BLACK)
        for _ in range(100):
            board = random_board(rng)
            for phase in Phase:
                self.assertEqual(
                    set(legal_destinations(piece, None, board, phase)),
                    set(board.empty_positions()),
                )


if __name__ == "__main__":
    unittest.main()
