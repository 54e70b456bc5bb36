from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .board import Board
from .piece import Piece
from .types import Color, Phase, PieceType, Position

Direction = Tuple[int, int]

ROOK_DIRECTIONS: Tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRECTIONS: Tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
KNIGHT_OFFSETS: Tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)


def pawn_direction(owner: Color) -> int:
    """Row step toward the opposite edge: white climbs to row 0, black to row 3."""
    return -1 if owner is Color.WHITE else 1


def _can_land(piece: Piece, board: Board, pos: Position) -> bool:
    occupant = board.piece_at(pos)
    return occupant is None or occupant.owner is not piece.owner


def _slide(
    piece: Piece, origin: Position, board: Board, directions: Iterable[Direction]
) -> List[Position]:
    out: List[Position] = []
    for d_row, d_col in directions:
        row, col = origin.row + d_row, origin.col + d_col
        while Board.in_bounds(row, col):
            pos = Position(row, col)
            occupant = board.piece_at(pos)
            if occupant is None:
                out.append(pos)
            else:
                if occupant.owner is not piece.owner:
                    out.append(pos)
                break
            row += d_row
            col += d_col
    return out


def _knight(piece: Piece, origin: Position, board: Board) -> List[Position]:
    out: List[Position] = []
    for d_row, d_col in KNIGHT_OFFSETS:
        row, col = origin.row + d_row, origin.col + d_col
        if Board.in_bounds(row, col) and _can_land(piece, board, Position(row, col)):
            out.append(Position(row, col))
    return out


def _pawn(piece: Piece, origin: Position, board: Board) -> List[Position]:
    out: List[Position] = []
    step = pawn_direction(piece.owner)
    row = origin.row + step
    if Board.in_bounds(row, origin.col) and board.is_empty(Position(row, origin.col)):
        out.append(Position(row, origin.col))
    # diagonal squares are capture-only
    for d_col in (-1, 1):
        col = origin.col + d_col
        if not Board.in_bounds(row, col):
            continue
        occupant = board.piece_at(Position(row, col))
        if occupant is not None and occupant.owner is not piece.owner:
            out.append(Position(row, col))
    return out


def placement_destinations(board: Board) -> List[Position]:
    return board.empty_positions()


def legal_destinations(
    piece: Piece, origin: Optional[Position], board: Board, phase: Phase
) -> List[Position]:
    """Legal destination squares for ``piece``.

    With no ``origin`` the piece comes from the reserve and may go to any
    empty cell whatever its type or the phase. With an ``origin`` the piece
    moves by its own rules in either phase. Pure query.
    """
    if origin is None:
        return placement_destinations(board)

    if piece.kind is PieceType.ROOK:
        return _slide(piece, origin, board, ROOK_DIRECTIONS)
    if piece.kind is PieceType.BISHOP:
        return _slide(piece, origin, board, BISHOP_DIRECTIONS)
    if piece.kind is PieceType.KNIGHT:
        return _knight(piece, origin, board)
    if piece.kind is PieceType.PAWN:
        return _pawn(piece, origin, board)
    raise ValueError(f"Unknown piece type: {piece.kind}")
