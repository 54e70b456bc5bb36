from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .config import config
from .piece import Piece
from .types import Color, PieceType, Position

_SYMBOLS = {
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
    "P": PieceType.PAWN,
}


@dataclass(slots=True)
class Cell:
    position: Position
    piece: Optional[Piece] = None


@dataclass(slots=True)
class Board:
    """Fixed 4x4 grid of cells. Owns placement only, no rule logic."""

    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            size = config.BOARD_SIZE
            self.cells = [
                [Cell(position=Position(r, c)) for c in range(size)]
                for r in range(size)
            ]

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from rows of symbols.

        Uppercase letters are white, lowercase black, ``.`` is empty:
        ``R`` rook, ``B`` bishop, ``N`` knight, ``P`` pawn. Ids follow the
        usual ``<owner>-<kind>`` scheme, so a row set must not repeat a
        piece of the same owner and kind.
        """
        board = cls()
        if len(rows) != config.BOARD_SIZE:
            raise ValueError(f"Expected {config.BOARD_SIZE} rows, got {len(rows)}")
        for r, row in enumerate(rows):
            symbols = row.replace(" ", "")
            if len(symbols) != config.BOARD_SIZE:
                raise ValueError(f"Row {r} must have {config.BOARD_SIZE} cells: {row!r}")
            for c, sym in enumerate(symbols):
                if sym == ".":
                    continue
                kind = _SYMBOLS.get(sym.upper())
                if kind is None:
                    raise ValueError(f"Unknown piece symbol {sym!r}")
                owner = Color.WHITE if sym.isupper() else Color.BLACK
                board.place(Position(r, c), Piece(kind=kind, owner=owner))
        return board

    def clone(self) -> Board:
        """Independent deep copy: new cells and new piece objects."""
        return Board(
            cells=[
                [
                    Cell(
                        position=cell.position,
                        piece=cell.piece.copy() if cell.piece else None,
                    )
                    for cell in row
                ]
                for row in self.cells
            ]
        )

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < config.BOARD_SIZE and 0 <= col < config.BOARD_SIZE

    def piece_at(self, position: Position) -> Optional[Piece]:
        return self.cells[position.row][position.col].piece

    def is_empty(self, position: Position) -> bool:
        return self.piece_at(position) is None

    def place(self, position: Position, piece: Piece) -> None:
        self.cells[position.row][position.col].piece = piece

    def remove(self, position: Position) -> Optional[Piece]:
        cell = self.cells[position.row][position.col]
        piece, cell.piece = cell.piece, None
        return piece

    def empty_positions(self) -> List[Position]:
        return [cell.position for row in self.cells for cell in row if cell.piece is None]

    def occupied(self) -> Iterator[Tuple[Position, Piece]]:
        for row in self.cells:
            for cell in row:
                if cell.piece is not None:
                    yield cell.position, cell.piece

    def pieces_of(self, color: Color) -> List[Tuple[Position, Piece]]:
        return [(pos, pc) for pos, pc in self.occupied() if pc.owner is color]

    def count(self, color: Color) -> int:
        return sum(1 for _, pc in self.occupied() if pc.owner is color)

    def locate(self, piece_id: str) -> Optional[Position]:
        for pos, pc in self.occupied():
            if pc.piece_id == piece_id:
                return pos
        return None

    def ownership_matrix(self, color: Color) -> np.ndarray:
        """(4, 4) int8 array: +1 where ``color`` owns the cell, -1 for the
        opponent, 0 when empty."""
        size = config.BOARD_SIZE
        out = np.zeros((size, size), dtype=np.int8)
        for pos, pc in self.occupied():
            out[pos.row, pos.col] = 1 if pc.owner is color else -1
        return out

    def __str__(self) -> str:
        return "\n".join(
            " ".join(cell.piece.symbol if cell.piece else "." for cell in row)
            for row in self.cells
        )
