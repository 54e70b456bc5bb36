from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from .board import Board
from .config import config
from .errors import InvariantViolation, PositionError
from .piece import Piece
from .player import Player
from .rules import legal_destinations
from .types import (
    Color,
    Difficulty,
    GameEvent,
    GameMode,
    Move,
    MoveResult,
    Phase,
    Position,
    Selection,
)
from .win import detect_win

EventListener = Callable[[GameEvent], None]


def phase_for(total_placed: int) -> Phase:
    return Phase.MOVEMENT if total_placed >= config.MOVEMENT_THRESHOLD else Phase.PLACEMENT


@dataclass(slots=True)
class Game:
    """Turn order, reserves, phase and capture bookkeeping for one session.

    The game is the only writer of its board. Invalid input (stale
    selection, illegal destination, acting after the end) is rejected
    without raising.
    """

    mode: GameMode = GameMode.LOCAL
    difficulty: Difficulty = Difficulty.MEDIUM
    board: Board = field(init=False)
    players: Dict[Color, Player] = field(init=False)
    current_player: Color = field(init=False)
    phase: Phase = field(init=False)
    selection: Optional[Selection] = field(default=None, init=False)
    legal_moves: List[Position] = field(default_factory=list, init=False)
    winner: Optional[Color] = field(default=None, init=False)
    winning_line: Optional[Tuple[Position, ...]] = field(default=None, init=False)
    history: List[Move] = field(default_factory=list, init=False)
    _listeners: List[EventListener] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._initialise()

    def _initialise(self) -> None:
        self.board = Board.empty()
        self.players = {color: Player(color) for color in Color}
        self.current_player = Color.WHITE
        self.phase = Phase.PLACEMENT
        self.selection = None
        self.legal_moves = []
        self.winner = None
        self.winning_line = None
        self.history = []

    @classmethod
    def from_position(
        cls,
        board: Board,
        reserves: Mapping[Color, Sequence[Piece]],
        current_player: Color = Color.WHITE,
        mode: GameMode = GameMode.LOCAL,
        difficulty: Difficulty = Difficulty.MEDIUM,
    ) -> "Game":
        """Start from an arbitrary position; placed counts come from the board."""
        game = cls(mode=mode, difficulty=difficulty)
        game.board = board
        game.players = {
            color: Player(
                color,
                reserve=list(reserves.get(color, ())),
                placed=board.count(color),
            )
            for color in Color
        }
        game.current_player = current_player
        game.phase = phase_for(game.total_placed)
        try:
            game._verify_accounting()
        except InvariantViolation as e:
            raise PositionError(f"Cannot load position: {e}") from e
        win = detect_win(board)
        if win is not None:
            game.winner, game.winning_line = win.winner, win.line
        return game

    # --- Queries ---
    def reserve(self, color: Color) -> List[Piece]:
        return self.players[color].reserve

    def placed(self, color: Color) -> int:
        return self.players[color].placed

    @property
    def total_placed(self) -> int:
        return sum(p.placed for p in self.players.values())

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def computer_color(self) -> Optional[Color]:
        if self.mode is not GameMode.AI:
            return None
        return Color(config.HUMAN_COLOR).opponent

    # --- Feedback ---
    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def _emit(self, events: List[GameEvent], event: GameEvent) -> None:
        events.append(event)
        for listener in self._listeners:
            listener(event)

    # --- Selection ---
    def _selection_is_real(self, piece: Piece, origin: Optional[Position]) -> bool:
        if piece.owner is not self.current_player:
            return False
        if origin is None:
            return self.players[piece.owner].find_in_reserve(piece.piece_id) is not None
        if not Board.in_bounds(origin.row, origin.col):
            return False
        occupant = self.board.piece_at(origin)
        return occupant is not None and occupant.piece_id == piece.piece_id

    def select_piece(self, piece: Piece, origin: Optional[Position] = None) -> List[Position]:
        """Select a reserve piece (``origin=None``) or a board piece of the
        side to move and cache its legal destinations. Replaces any earlier
        selection."""
        if not self._selection_is_real(piece, origin):
            self.selection = None
            self.legal_moves = []
            self._emit([], GameEvent.INVALID)
            return []

        self.selection = Selection(piece=piece, origin=origin)
        self.legal_moves = legal_destinations(piece, origin, self.board, self.phase)
        self._emit([], GameEvent.SELECT)
        return list(self.legal_moves)

    def deselect(self) -> None:
        self.selection = None
        self.legal_moves = []

    # --- Moves ---
    def _reject(self, reason: str) -> MoveResult:
        logger.debug(f"Move rejected: {reason}")
        result = MoveResult(accepted=False)
        self._emit(result.events, GameEvent.INVALID)
        return result

    def execute_move(self, destination: Position) -> MoveResult:
        if self.selection is None:
            return self._reject("no active selection")
        if self.winner is not None:
            return self._reject("game is over")
        if destination not in self.legal_moves:
            return self._reject(f"{destination} is not a legal destination")

        piece, origin = self.selection.piece, self.selection.origin
        captured = self.board.remove(destination)
        if origin is None:
            self.players[piece.owner].take_from_reserve(piece)
        else:
            self.board.remove(origin)
        self.board.place(destination, piece)

        if captured is not None:
            self.players[captured.owner].return_to_reserve(captured)

        self.phase = phase_for(self.total_placed)

        move = Move(piece=piece, destination=destination, origin=origin, captured=captured)
        self.history.append(move)
        self.selection = None
        self.legal_moves = []

        result = MoveResult(accepted=True, captured=captured, move=move)
        if captured is not None:
            self._emit(result.events, GameEvent.CAPTURE)
        else:
            self._emit(result.events, GameEvent.PLACE if origin is None else GameEvent.MOVE)

        win = detect_win(self.board)
        if win is not None:
            self.winner, self.winning_line = win.winner, win.line
            logger.debug(f"{win.winner.value} wins on {[str(p) for p in win.line]}")
            lost = self.mode is GameMode.AI and win.winner is self.computer_color
            self._emit(result.events, GameEvent.LOSE if lost else GameEvent.WIN)
        else:
            self.current_player = self.current_player.opponent

        self._verify_accounting()
        return result

    def reset(
        self, mode: Optional[GameMode] = None, difficulty: Optional[Difficulty] = None
    ) -> None:
        """Back to a fresh game. Listeners stay registered."""
        if mode is not None:
            self.mode = mode
        if difficulty is not None:
            self.difficulty = difficulty
        self._initialise()

    # --- Invariants ---
    def _verify_accounting(self) -> None:
        ids = [pc.piece_id for _, pc in self.board.occupied()]
        for player in self.players.values():
            ids.extend(pc.piece_id for pc in player.reserve)
            if player.placed < 0:
                raise InvariantViolation(f"{player.color.value} placed count is negative")
            if player.placed != self.board.count(player.color):
                raise InvariantViolation(
                    f"{player.color.value} placed count {player.placed} does not match the board"
                )
        if len(ids) != config.TOTAL_PIECES:
            raise InvariantViolation(f"Expected {config.TOTAL_PIECES} pieces, found {len(ids)}")
        if len(set(ids)) != len(ids):
            raise InvariantViolation("A piece id appears in more than one place")


def create_game(
    mode: GameMode = GameMode.LOCAL, difficulty: Difficulty = Difficulty.MEDIUM
) -> Game:
    return Game(mode=mode, difficulty=difficulty)
