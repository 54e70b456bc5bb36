from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from loguru import logger

from ..engine.board import Board
from ..engine.config import strategy_config
from ..engine.piece import Piece
from ..engine.types import Color, Difficulty, Move, Phase
from .base import BaseStrategy
from .evaluation import evaluate
from .features import is_winning, simulate
from .types import DeviationRule, DifficultyProfile, ScoredMove, StrategyContext

DIFFICULTY_PROFILES: Dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(
        jitter=strategy_config.easy_jitter,
        deviation=strategy_config.easy_deviation,
        rule=DeviationRule.TOP_THREE,
    ),
    Difficulty.MEDIUM: DifficultyProfile(
        jitter=strategy_config.medium_jitter,
        deviation=strategy_config.medium_deviation,
        rule=DeviationRule.RUNNER_UP,
    ),
    Difficulty.HARD: DifficultyProfile(jitter=strategy_config.hard_jitter),
}

_default_rng = random.Random(strategy_config.seed)


class GreedyStrategy(BaseStrategy):
    """Single-ply evaluator: take an immediate win if there is one, otherwise
    score every candidate with :func:`evaluate` plus difficulty noise."""

    name = "greedy"

    def __init__(
        self,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.difficulty = Difficulty(difficulty)
        self.profile = DIFFICULTY_PROFILES[self.difficulty]

    def select_move(self, ctx: StrategyContext, candidates: List[Move]) -> Optional[Move]:
        for move in candidates:
            if is_winning(ctx.board, move, ctx.player):
                logger.debug(f"{ctx.player.value} takes the win with {move.piece} -> {move.destination}")
                return move

        ranked = self.rank(ctx, candidates)
        index = self._pick_index(len(ranked))
        choice = ranked[index]
        logger.debug(
            f"{ctx.player.value} ({self.difficulty.value}) picks #{index} of {len(ranked)}: "
            f"{choice.move.piece} -> {choice.move.destination} ({choice.score:.1f})"
        )
        return choice.move

    def rank(self, ctx: StrategyContext, candidates: List[Move]) -> List[ScoredMove]:
        """Jittered scores, best first. The sort is stable, so equal scores
        keep candidate order."""
        scored: List[ScoredMove] = []
        jitter = self.profile.jitter
        for move in candidates:
            score = evaluate(simulate(ctx.board, move), ctx.player)
            score += self.rng.uniform(-jitter, jitter)
            scored.append(ScoredMove(move=move, score=score))
        scored.sort(key=lambda sm: sm.score, reverse=True)
        return scored

    def _pick_index(self, n: int) -> int:
        rule = self.profile.rule
        if rule is DeviationRule.RUNNER_UP:
            if self.rng.random() < self.profile.deviation and n > 1:
                return 1
        elif rule is DeviationRule.TOP_THREE:
            if self.rng.random() < self.profile.deviation:
                return self.rng.randrange(min(3, n))
        return 0


def choose_move(
    board: Board,
    player: Color,
    reserve: Sequence[Piece],
    phase: Phase,
    difficulty: Difficulty | str,
    rng: random.Random | None = None,
) -> Optional[Move]:
    """Pick the computer's move for ``player``; ``None`` when it has none."""
    strategy = GreedyStrategy(difficulty=difficulty, rng=rng or _default_rng)
    return strategy.decide(board, player, reserve, phase)
