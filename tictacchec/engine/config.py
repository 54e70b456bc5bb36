import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Board ---
    BOARD_SIZE: int = 4
    LINE_LENGTH: int = 4
    PIECES_PER_PLAYER: int = 4
    # Total placements (both players) after which the game is in movement phase
    MOVEMENT_THRESHOLD: int = int(os.getenv("MOVEMENT_THRESHOLD", 6))

    # Human seat in AI mode; the computer plays the other color
    HUMAN_COLOR: str = os.getenv("HUMAN_COLOR", "white")

    # Simulator
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 200))

    # Derived
    TOTAL_PIECES: int = 0
    CENTER_CELLS: tuple[tuple[int, int], ...] = field(
        default_factory=lambda: ((1, 1), (1, 2), (2, 1), (2, 2))
    )

    def __post_init__(self):
        self.TOTAL_PIECES = self.PIECES_PER_PLAYER * 2

        if not 0 < self.MOVEMENT_THRESHOLD <= self.TOTAL_PIECES:
            raise ValueError("MOVEMENT_THRESHOLD must be between 1 and TOTAL_PIECES")
        if self.HUMAN_COLOR not in ("white", "black"):
            raise ValueError("HUMAN_COLOR must be 'white' or 'black'")


@dataclass(slots=True)
class StrategyConfig:
    # Line-control weights indexed by piece count in an unmixed line (0..4)
    own_line_weights: tuple[float, ...] = (0.0, 3.0, 20.0, 200.0, 10000.0)
    opponent_line_weights: tuple[float, ...] = (0.0, -2.0, -15.0, -150.0, -10000.0)
    center_weight: float = 5.0

    # Jitter half-widths per difficulty
    easy_jitter: float = 25.0
    medium_jitter: float = 10.0
    hard_jitter: float = 2.5

    # Chance of deviating from the best-scored candidate
    easy_deviation: float = 0.4
    medium_deviation: float = 0.2

    # Optional global seed for computer players (None = system entropy)
    seed: int | None = (
        int(os.environ["AI_SEED"]) if os.getenv("AI_SEED") else None
    )


config = Config()
strategy_config = StrategyConfig()
