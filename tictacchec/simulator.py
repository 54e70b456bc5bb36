from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

from .engine.config import config
from .engine.errors import InvariantViolation
from .engine.game import Game
from .engine.types import Color, Difficulty, GameMode, Move, MoveResult
from .stats import GameStats, ResultRecorder
from .strategy.base import BaseStrategy
from .strategy.greedy import GreedyStrategy
from .strategy.registry import available, create


@dataclass(slots=True)
class GameRecord:
    winner: Optional[Color]
    turns: int
    stalemate: bool = False
    history: List[Move] = field(default_factory=list)


@dataclass(slots=True)
class Simulator:
    """Drives computer turns on a :class:`Game`.

    A computer turn is ``decide`` on the current position followed by
    ``select_piece`` + ``execute_move``, exactly as a human turn would be
    applied. Nothing is cached between turns, so a caller may delay a turn
    arbitrarily; after ``game.reset()`` any move decided earlier must be
    dropped rather than replayed.
    """

    game: Game
    strategies: Dict[Color, BaseStrategy]
    recorder: Optional[ResultRecorder] = None
    player_color: Color = Color.WHITE  # side whose result is recorded

    @classmethod
    def for_game(
        cls,
        game: Game,
        strategies: Optional[Dict[Color, BaseStrategy]] = None,
        recorder: Optional[ResultRecorder] = None,
        rng: random.Random | None = None,
    ) -> "Simulator":
        if strategies is None:
            rng = rng or random.Random()
            strategies = {
                color: GreedyStrategy(difficulty=game.difficulty, rng=rng) for color in Color
            }
        return cls(game=game, strategies=strategies, recorder=recorder)

    def play_turn(self) -> Optional[MoveResult]:
        """Play one computer turn for the side to move.

        Returns None when the game is already over or the side to move has
        no legal move at all.
        """
        game = self.game
        if game.is_over:
            return None
        color = game.current_player
        move = self.strategies[color].decide(game.board, color, game.reserve(color), game.phase)
        if move is None:
            logger.debug(f"{color.value} has no legal move")
            return None
        game.select_piece(move.piece, move.origin)
        result = game.execute_move(move.destination)
        if not result.accepted:
            raise InvariantViolation(
                f"Engine rejected a generated move: {move.piece} -> {move.destination}"
            )
        return result

    def play_game(self, max_turns: int | None = None) -> GameRecord:
        """Play until someone wins, the side to move is stuck, or the turn cap (a draw)."""
        max_turns = config.MAX_TURNS if max_turns is None else max_turns
        turns = 0
        stalemate = False
        while not self.game.is_over and turns < max_turns:
            if self.play_turn() is None:
                stalemate = True
                break
            turns += 1

        record = GameRecord(
            winner=self.game.winner,
            turns=turns,
            stalemate=stalemate,
            history=list(self.game.history),
        )
        if self.recorder is not None:
            self.recorder.record_game_result(
                record.winner, self.player_color, self.game.mode, self.game.difficulty
            )
        return record


def _build_strategy(name: str, rng: random.Random) -> BaseStrategy:
    if name in {d.value for d in Difficulty}:
        return GreedyStrategy(difficulty=name, rng=rng)
    # argparse choices already limit names to the registry
    return create(name, rng=rng)


def parse_args() -> argparse.Namespace:
    choices = sorted({d.value for d in Difficulty} | set(available()))
    parser = argparse.ArgumentParser(
        description="Play computer-vs-computer Tic-Tac-Chec games and report the results"
    )
    parser.add_argument("--games", type=int, default=100, help="Number of games to play")
    parser.add_argument(
        "--white", type=str, default="hard", choices=choices, help="White player (difficulty or strategy)"
    )
    parser.add_argument(
        "--black", type=str, default="medium", choices=choices, help="Black player (difficulty or strategy)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--max-turns", type=int, default=config.MAX_TURNS, help="Turn cap before a game is a draw"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    rng = random.Random(args.seed)
    strategies = {
        Color.WHITE: _build_strategy(args.white, rng),
        Color.BLACK: _build_strategy(args.black, rng),
    }
    black_difficulty = args.black if args.black in {d.value for d in Difficulty} else Difficulty.MEDIUM
    stats = GameStats()
    game = Game(mode=GameMode.AI, difficulty=Difficulty(black_difficulty))
    sim = Simulator(game=game, strategies=strategies, recorder=stats)

    logger.info(f"Simulating {args.games} games: white={args.white} vs black={args.black}")
    start = time.time()
    total_turns = 0
    for _ in range(args.games):
        game.reset()
        record = sim.play_game(max_turns=args.max_turns)
        total_turns += record.turns

    elapsed = time.time() - start
    logger.info(
        f"White {stats.wins} - Black {stats.losses} - Draws {stats.draws} "
        f"(win rate {stats.win_rate:.1%}, best streak {stats.best_streak})"
    )
    logger.info(
        f"Average length {total_turns / max(args.games, 1):.1f} turns, {elapsed:.2f}s total"
    )


if __name__ == "__main__":
    main()
