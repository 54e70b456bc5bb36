from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .piece import Piece


class Color(str, Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceType(str, Enum):
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"


class Phase(str, Enum):
    PLACEMENT = "placement"
    MOVEMENT = "movement"


class GameMode(str, Enum):
    LOCAL = "local"
    AI = "ai"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameEvent(str, Enum):
    """Feedback signals for the sound/haptics collaborator."""

    SELECT = "select"
    PLACE = "place"
    MOVE = "move"
    CAPTURE = "capture"
    WIN = "win"
    LOSE = "lose"
    INVALID = "invalid"


class MoveKind(str, Enum):
    PLACEMENT = "placement"
    MOVEMENT = "movement"


@dataclass(frozen=True, slots=True)
class Position:
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True, slots=True)
class Move:
    piece: "Piece"
    destination: Position
    origin: Optional[Position] = None  # None = placed from reserve
    captured: Optional["Piece"] = None

    @property
    def kind(self) -> MoveKind:
        return MoveKind.PLACEMENT if self.origin is None else MoveKind.MOVEMENT

    @property
    def is_placement(self) -> bool:
        return self.origin is None


@dataclass(slots=True)
class MoveResult:
    accepted: bool
    captured: Optional["Piece"] = None
    move: Optional[Move] = None
    events: List[GameEvent] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class WinResult:
    winner: Color
    line: Tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class Selection:
    piece: "Piece"
    origin: Optional[Position] = None
