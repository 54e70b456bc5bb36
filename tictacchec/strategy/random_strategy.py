from __future__ import annotations

from typing import List, Optional

from ..engine.types import Move
from .base import BaseStrategy
from .types import StrategyContext


class RandomStrategy(BaseStrategy):
    """Uniformly random legal move. Baseline opponent for simulations."""

    name = "random"

    def select_move(self, ctx: StrategyContext, candidates: List[Move]) -> Optional[Move]:
        return self.rng.choice(candidates)
