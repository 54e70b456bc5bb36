"""
Game statistics and the narrow interfaces the engine offers to the host app.
Storage, the leaderboard service and sound playback live outside this package.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Protocol

from .engine.types import Color, Difficulty, GameEvent, GameMode


class ResultRecorder(Protocol):
    def record_game_result(
        self,
        winner: Optional[Color],
        player_color: Color,
        mode: GameMode,
        difficulty: Optional[Difficulty] = None,
    ) -> None:
        ...


class RankingProvider(Protocol):
    def fetch_ranking(self, limit: int = 10) -> List[Dict[str, object]]:
        ...


class FeedbackSink(Protocol):
    def __call__(self, event: GameEvent) -> None:
        ...


@dataclass(slots=True)
class DifficultyRecord:
    wins: int = 0
    losses: int = 0


def _by_difficulty() -> Dict[str, DifficultyRecord]:
    return {d.value: DifficultyRecord() for d in Difficulty}


@dataclass(slots=True)
class GameStats:
    """Running win/loss record from one player's point of view."""

    wins: int = 0
    losses: int = 0
    draws: int = 0
    games_played: int = 0
    win_streak: int = 0
    best_streak: int = 0
    by_difficulty: Dict[str, DifficultyRecord] = field(default_factory=_by_difficulty)

    def record_game_result(
        self,
        winner: Optional[Color],
        player_color: Color,
        mode: GameMode,
        difficulty: Optional[Difficulty] = None,
    ) -> None:
        self.games_played += 1
        track = mode is GameMode.AI and difficulty is not None
        if winner is None:
            self.draws += 1
            self.win_streak = 0
        elif winner is player_color:
            self.wins += 1
            self.win_streak += 1
            self.best_streak = max(self.best_streak, self.win_streak)
            if track:
                self.by_difficulty[Difficulty(difficulty).value].wins += 1
        else:
            self.losses += 1
            self.win_streak = 0
            if track:
                self.by_difficulty[Difficulty(difficulty).value].losses += 1

    @property
    def win_rate(self) -> float:
        return self.wins / self.games_played if self.games_played else 0.0

    def reset(self) -> None:
        self.wins = self.losses = self.draws = self.games_played = 0
        self.win_streak = self.best_streak = 0
        self.by_difficulty = _by_difficulty()

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "GameStats":
        tallies = _by_difficulty()
        for name, record in (data.get("by_difficulty") or {}).items():
            if name in tallies:
                tallies[name] = DifficultyRecord(
                    wins=int(record.get("wins", 0)), losses=int(record.get("losses", 0))
                )
        return cls(
            wins=int(data.get("wins", 0)),
            losses=int(data.get("losses", 0)),
            draws=int(data.get("draws", 0)),
            games_played=int(data.get("games_played", 0)),
            win_streak=int(data.get("win_streak", 0)),
            best_streak=int(data.get("best_streak", 0)),
            by_difficulty=tallies,
        )
