from __future__ import annotations

from dataclasses import dataclass

from .types import Color, PieceType


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece. Ownership never changes, even after a capture:
    a captured piece goes back to its owner's reserve."""

    kind: PieceType
    owner: Color
    piece_id: str = ""

    def __post_init__(self) -> None:
        if not self.piece_id:
            object.__setattr__(self, "piece_id", f"{self.owner.value}-{self.kind.value}")

    def copy(self) -> Piece:
        return Piece(kind=self.kind, owner=self.owner, piece_id=self.piece_id)

    @property
    def symbol(self) -> str:
        letter = "N" if self.kind is PieceType.KNIGHT else self.kind.value[0].upper()
        return letter if self.owner is Color.WHITE else letter.lower()

    def __str__(self) -> str:
        return self.piece_id


def starting_reserve(owner: Color) -> list[Piece]:
    return [Piece(kind=kind, owner=owner) for kind in PieceType]
