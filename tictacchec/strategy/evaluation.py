from __future__ import annotations

import numpy as np

from ..engine.board import Board
from ..engine.config import config, strategy_config
from ..engine.types import Color


def _line_views(ownership: np.ndarray) -> np.ndarray:
    """(10, 4) array of the board lines: rows, columns, both diagonals."""
    return np.vstack(
        [
            ownership,
            ownership.T,
            np.diag(ownership)[None, :],
            np.diag(np.fliplr(ownership))[None, :],
        ]
    )


def evaluate(board: Board, player: Color) -> float:
    """Static line-control score of ``board`` from ``player``'s side.

    Lines holding pieces of both sides are ignored. Pure lines score by
    piece count (own 3/20/200/10000, opponent -2/-15/-150/-10000) and each
    centre square adds +5 for ``player`` or -5 for the opponent.
    """
    ownership = board.ownership_matrix(player)
    lines = _line_views(ownership)
    own = (lines == 1).sum(axis=1)
    opp = (lines == -1).sum(axis=1)

    score = 0.0
    for mine, theirs in zip(own.tolist(), opp.tolist()):
        if mine and theirs:
            continue
        if mine:
            score += strategy_config.own_line_weights[mine]
        elif theirs:
            score += strategy_config.opponent_line_weights[theirs]

    rows, cols = zip(*config.CENTER_CELLS)
    score += float(ownership[list(rows), list(cols)].sum()) * strategy_config.center_weight
    return score
