from __future__ import annotations

from typing import List, Sequence

from ..engine.board import Board
from ..engine.piece import Piece
from ..engine.rules import legal_destinations
from ..engine.types import Color, Move, Phase
from ..engine.win import completes_line
from .types import StrategyContext


def generate_candidates(ctx: StrategyContext) -> List[Move]:
    """Every move the computer may consider.

    Reserve placements are only offered during the placement phase, while
    pieces already on the board may move in either phase.
    """
    moves: List[Move] = []
    if ctx.phase is Phase.PLACEMENT and ctx.reserve:
        for piece in ctx.reserve:
            for dest in legal_destinations(piece, None, ctx.board, ctx.phase):
                moves.append(Move(piece=piece, destination=dest))

    for origin, piece in ctx.board.pieces_of(ctx.player):
        for dest in legal_destinations(piece, origin, ctx.board, Phase.MOVEMENT):
            moves.append(
                Move(
                    piece=piece,
                    destination=dest,
                    origin=origin,
                    captured=ctx.board.piece_at(dest),
                )
            )
    return moves


def simulate(board: Board, move: Move) -> Board:
    """Apply ``move`` to a clone of ``board``. Only occupancy is updated."""
    after = board.clone()
    if move.origin is not None:
        after.remove(move.origin)
    after.place(move.destination, move.piece.copy())
    return after


def is_winning(board: Board, move: Move, player: Color) -> bool:
    return completes_line(simulate(board, move), player)


def winning_moves(
    board: Board, player: Color, reserve: Sequence[Piece], phase: Phase
) -> List[Move]:
    ctx = StrategyContext(board=board, player=player, reserve=reserve, phase=phase)
    return [mv for mv in generate_candidates(ctx) if is_winning(board, mv, player)]
