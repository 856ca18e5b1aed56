from __future__ import annotations
from typing import Optional, List, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.board import Board
from dropfour.types import Coord, Disc

# Scan order: horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _run(board: Board, r: int, c: int, dr: int, dc: int) -> Optional[List[Coord]]:
    p = board.grid[r][c]
    if p is Disc.EMPTY:
        return None
    line = [(r, c)]
    for k in range(1, CONNECT_N):
        nr, nc = r + dr * k, c + dc * k
        if not board.in_bounds(nr, nc) or board.grid[nr][nc] is not p:
            return None
        line.append((nr, nc))
    return line


def check_winner_with_line(board: Board) -> Optional[Tuple[Disc, List[Coord]]]:
    """
    First four-in-a-row found scanning cells row-major, directions in DIRECTIONS order.
    """
    for r in range(board.rows):
        for c in range(board.cols):
            if board.grid[r][c] is Disc.EMPTY:
                continue
            for dr, dc in DIRECTIONS:
                line = _run(board, r, c, dr, dc)
                if line is not None:
                    return board.grid[r][c], line
    return None


def check_winner(board: Board) -> Optional[Disc]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def is_terminal(board: Board) -> bool:
    return board.is_full() or check_winner(board) is not None
