from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..engine.board import Board
from ..engine.piece import Piece
from ..engine.types import Color, Move, Phase
from .features import generate_candidates
from .types import StrategyContext


class BaseStrategy:
    """Base class for computer players with shared candidate handling."""

    name = "base"

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def decide(
        self,
        board: Board,
        player: Color,
        reserve: Sequence[Piece],
        phase: Phase,
    ) -> Optional[Move]:
        ctx = StrategyContext(board=board, player=player, reserve=reserve, phase=phase)
        candidates = generate_candidates(ctx)
        if not candidates:
            return None
        return self.select_move(ctx, candidates)

    def select_move(
        self, ctx: StrategyContext, candidates: List[Move]
    ) -> Optional[Move]:  # pragma: no cover - abstract
        raise NotImplementedError
