"""Computer opponents: candidate generation, position scoring and move choice."""

from .base import BaseStrategy
from .evaluation import evaluate
from .features import generate_candidates, is_winning, simulate, winning_moves
from .greedy import DIFFICULTY_PROFILES, GreedyStrategy, choose_move
from .random_strategy import RandomStrategy
from .registry import available, create
from .types import DeviationRule, DifficultyProfile, ScoredMove, StrategyContext

__all__ = [
    "BaseStrategy",
    "GreedyStrategy",
    "RandomStrategy",
    "DIFFICULTY_PROFILES",
    "DeviationRule",
    "DifficultyProfile",
    "ScoredMove",
    "StrategyContext",
    "choose_move",
    "evaluate",
    "generate_candidates",
    "is_winning",
    "simulate",
    "winning_moves",
    "available",
    "create",
]
