from __future__ import annotations

from typing import List, Optional, Tuple

from .board import Board
from .config import config
from .types import Color, Position, WinResult

Line = Tuple[Position, ...]


def _compute_lines() -> Tuple[Line, ...]:
    size = config.BOARD_SIZE
    rows = [tuple(Position(r, c) for c in range(size)) for r in range(size)]
    cols = [tuple(Position(r, c) for r in range(size)) for c in range(size)]
    main_diag = tuple(Position(i, i) for i in range(size))
    anti_diag = tuple(Position(i, size - 1 - i) for i in range(size))
    # reporting order: rows, columns, main diagonal, anti-diagonal
    return tuple(rows + cols + [main_diag, anti_diag])


LINES: Tuple[Line, ...] = _compute_lines()


def line_owner(board: Board, line: Line) -> Optional[Color]:
    """Owner of every cell in ``line``, or None if any cell is empty or mixed."""
    first = board.piece_at(line[0])
    if first is None:
        return None
    for pos in line[1:]:
        pc = board.piece_at(pos)
        if pc is None or pc.owner is not first.owner:
            return None
    return first.owner


def detect_win(board: Board) -> Optional[WinResult]:
    for line in LINES:
        owner = line_owner(board, line)
        if owner is not None:
            return WinResult(winner=owner, line=line)
    return None


def completes_line(board: Board, color: Color) -> bool:
    return any(line_owner(board, line) is color for line in LINES)


def winning_opportunities(board: Board, color: Color) -> List[Position]:
    """Empty cells that would finish a line already holding three of ``color``."""
    out: List[Position] = []
    for line in LINES:
        own = 0
        gap: Optional[Position] = None
        for pos in line:
            pc = board.piece_at(pos)
            if pc is None:
                gap = pos
            elif pc.owner is color:
                own += 1
        if own == config.LINE_LENGTH - 1 and gap is not None and gap not in out:
            out.append(gap)
    return out
