"""
Daily puzzle model. Puzzles are produced elsewhere; this module numbers and
seeds them by date, turns a puzzle into a playable game, lists the moves
that solve it on the spot and keeps the solver's completion streak.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta
from typing import List, Optional
from zoneinfo import ZoneInfo

from .engine.board import Board
from .engine.game import Game, phase_for
from .engine.piece import Piece
from .engine.types import Color, Difficulty, GameMode, Move, Phase
from .strategy.features import winning_moves

LAUNCH_DATE = date(2026, 1, 6)
PUZZLE_TIMEZONE = ZoneInfo("America/New_York")


def puzzle_today() -> date:
    return datetime.now(PUZZLE_TIMEZONE).date()


def date_seed(day: date) -> int:
    return day.year * 10000 + day.month * 100 + day.day


def puzzle_number(day: date) -> int:
    return max(1, (day - LAUNCH_DATE).days + 1)


@dataclass(slots=True)
class DailyPuzzle:
    puzzle_number: int
    date: str
    seed: int
    board: Board
    player_reserve: List[Piece] = field(default_factory=list)
    cpu_reserve: List[Piece] = field(default_factory=list)
    moves_to_win: int = 1
    hint: Optional[str] = None

    @classmethod
    def for_date(
        cls,
        day: date,
        board: Board,
        player_reserve: List[Piece],
        cpu_reserve: List[Piece],
        moves_to_win: int = 1,
        hint: Optional[str] = None,
    ) -> "DailyPuzzle":
        return cls(
            puzzle_number=puzzle_number(day),
            date=day.isoformat(),
            seed=date_seed(day),
            board=board,
            player_reserve=list(player_reserve),
            cpu_reserve=list(cpu_reserve),
            moves_to_win=moves_to_win,
            hint=hint,
        )

    @property
    def white_placed(self) -> int:
        return self.board.count(Color.WHITE)

    @property
    def black_placed(self) -> int:
        return self.board.count(Color.BLACK)

    def start_game(self, difficulty: Difficulty = Difficulty.MEDIUM) -> Game:
        """A computer game from the puzzle position, white (the solver) to move."""
        return Game.from_position(
            self.board.clone(),
            {Color.WHITE: self.player_reserve, Color.BLACK: self.cpu_reserve},
            current_player=Color.WHITE,
            mode=GameMode.AI,
            difficulty=difficulty,
        )

    def solutions(self) -> List[Move]:
        """White moves that complete a line immediately."""
        # A human may drop a reserve piece in either phase, so always offer placements.
        phase = Phase.PLACEMENT if self.player_reserve else phase_for(
            self.white_placed + self.black_placed
        )
        return winning_moves(self.board, Color.WHITE, self.player_reserve, phase)


@dataclass(slots=True)
class PuzzleStats:
    """Daily completion record. Days are keyed by :func:`date_seed`."""

    last_completed_seed: Optional[int] = None
    current_streak: int = 0
    best_streak: int = 0
    total_solved: int = 0
    completed_puzzles: List[int] = field(default_factory=list)

    def is_completed(self, day: Optional[date] = None) -> bool:
        day = day or puzzle_today()
        return self.last_completed_seed == date_seed(day)

    def mark_completed(self, day: Optional[date] = None) -> bool:
        """Record ``day``'s puzzle as solved. Returns False if it already was."""
        day = day or puzzle_today()
        if self.is_completed(day):
            return False

        if self.last_completed_seed == date_seed(day - timedelta(days=1)):
            self.current_streak += 1
        else:
            self.current_streak = 1
        self.best_streak = max(self.best_streak, self.current_streak)
        self.total_solved += 1
        self.last_completed_seed = date_seed(day)
        self.completed_puzzles.append(puzzle_number(day))
        return True

    def refresh_streak(self, day: Optional[date] = None) -> None:
        """Drop the current streak once a whole day went unsolved."""
        if self.last_completed_seed is None:
            return
        day = day or puzzle_today()
        recent = {date_seed(day), date_seed(day - timedelta(days=1))}
        if self.last_completed_seed not in recent:
            self.current_streak = 0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, today: Optional[date] = None) -> "PuzzleStats":
        last = data.get("last_completed_seed")
        stats = cls(
            last_completed_seed=int(last) if last is not None else None,
            current_streak=int(data.get("current_streak", 0)),
            best_streak=int(data.get("best_streak", 0)),
            total_solved=int(data.get("total_solved", 0)),
            completed_puzzles=[int(n) for n in data.get("completed_puzzles") or []],
        )
        stats.refresh_streak(today)
        return stats
