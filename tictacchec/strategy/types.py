from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..engine.board import Board
from ..engine.piece import Piece
from ..engine.types import Color, Move, Phase


class DeviationRule(str, Enum):
    NONE = "none"
    RUNNER_UP = "runner_up"  # take the second-best candidate
    TOP_THREE = "top_three"  # uniform pick among the three best


@dataclass(frozen=True, slots=True)
class DifficultyProfile:
    """How noisy a computer player is."""

    jitter: float  # half-width of the uniform noise added to each score
    deviation: float = 0.0  # probability of not taking the best candidate
    rule: DeviationRule = DeviationRule.NONE


@dataclass(slots=True)
class ScoredMove:
    move: Move
    score: float


@dataclass(slots=True)
class StrategyContext:
    """Input payload shared by strategies: the position seen by ``player``."""

    board: Board
    player: Color
    reserve: Sequence[Piece]
    phase: Phase
