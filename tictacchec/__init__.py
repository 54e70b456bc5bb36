"""
Tic-Tac-Chec
Chess-piece tic-tac-toe on a 4x4 board: rules engine and computer opponent.
"""

from tictacchec.engine import (
    Board,
    Color,
    Difficulty,
    Game,
    GameEvent,
    GameMode,
    Move,
    MoveResult,
    Phase,
    Piece,
    PieceType,
    Position,
    WinResult,
    create_game,
    detect_win,
    legal_destinations,
)
from tictacchec.simulator import GameRecord, Simulator
from tictacchec.stats import GameStats
from tictacchec.strategy import GreedyStrategy, RandomStrategy, choose_move, evaluate

__all__ = [
    "Board",
    "Color",
    "Difficulty",
    "Game",
    "GameEvent",
    "GameMode",
    "Move",
    "MoveResult",
    "Phase",
    "Piece",
    "PieceType",
    "Position",
    "WinResult",
    "create_game",
    "detect_win",
    "legal_destinations",
    "choose_move",
    "evaluate",
    "GreedyStrategy",
    "RandomStrategy",
    "Simulator",
    "GameRecord",
    "GameStats",
]
