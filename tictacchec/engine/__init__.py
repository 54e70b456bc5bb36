from .board import Board, Cell
from .config import config, strategy_config
from .errors import InvariantViolation, PositionError, TicTacChecError
from .game import Game, create_game, phase_for
from .piece import Piece, starting_reserve
from .player import Player
from .rules import legal_destinations
from .types import (
    Color,
    Difficulty,
    GameEvent,
    GameMode,
    Move,
    MoveKind,
    MoveResult,
    Phase,
    PieceType,
    Position,
    Selection,
    WinResult,
)
from .win import LINES, completes_line, detect_win, winning_opportunities

__all__ = [
    "Board",
    "Cell",
    "config",
    "strategy_config",
    "TicTacChecError",
    "InvariantViolation",
    "PositionError",
    "Game",
    "create_game",
    "phase_for",
    "Piece",
    "starting_reserve",
    "Player",
    "legal_destinations",
    "Color",
    "Difficulty",
    "GameEvent",
    "GameMode",
    "Move",
    "MoveKind",
    "MoveResult",
    "Phase",
    "PieceType",
    "Position",
    "Selection",
    "WinResult",
    "LINES",
    "completes_line",
    "detect_win",
    "winning_opportunities",
]
