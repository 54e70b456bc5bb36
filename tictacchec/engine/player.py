from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .piece import Piece, starting_reserve
from .types import Color


@dataclass(slots=True)
class Player:
    """One side of the game: its reserve and how many of its pieces are on the board."""

    color: Color
    reserve: List[Piece] = field(default=None)
    placed: int = 0

    def __post_init__(self) -> None:
        if self.reserve is None:
            self.reserve = starting_reserve(self.color)

    def find_in_reserve(self, piece_id: str) -> Optional[Piece]:
        return next((p for p in self.reserve if p.piece_id == piece_id), None)

    def take_from_reserve(self, piece: Piece) -> Piece:
        found = self.find_in_reserve(piece.piece_id)
        if found is None:
            raise KeyError(f"{piece.piece_id} is not in the {self.color.value} reserve")
        self.reserve.remove(found)
        self.placed += 1
        return found

    def return_to_reserve(self, piece: Piece) -> None:
        self.reserve.append(piece)
        self.placed -= 1
