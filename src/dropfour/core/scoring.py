from __future__ import annotations
from typing import Iterator, List

from dropfour.config import (
    CENTER_WEIGHT,
    CONNECT_N,
    WINDOW_FOUR,
    WINDOW_OPP_THREE,
    WINDOW_THREE,
    WINDOW_TWO,
)
from dropfour.core.board import Board
from dropfour.types import Coord, Disc


def windows(board: Board) -> Iterator[List[Coord]]:
    """Every run of CONNECT_N cells: horizontal, vertical, both diagonals."""
    rows, cols, n = board.rows, board.cols, CONNECT_N

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            yield [(r, c + i) for i in range(n)]

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            yield [(r + i, c) for i in range(n)]

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            yield [(r + i, c + i) for i in range(n)]

    # Diagonal up-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            yield [(r - i, c + i) for i in range(n)]


def _score_window(cells: List[Disc]) -> int:
    comp = cells.count(Disc.COMPUTER)
    human = cells.count(Disc.HUMAN)
    empty = cells.count(Disc.EMPTY)

    # mixed window: nobody can complete it
    if comp and human:
        return 0

    if comp == 4:
        return WINDOW_FOUR
    if comp == 3 and empty == 1:
        return WINDOW_THREE
    if comp == 2 and empty == 2:
        return WINDOW_TWO
    if human == 3 and empty == 1:
        return WINDOW_OPP_THREE
    return 0


def evaluate(board: Board) -> int:
    """
    Static value of a position from the computer's point of view.
    Only meaningful at non-terminal leaves; terminal scoring lives in the search.
    """
    score = 0

    center = board.cols // 2
    for r in range(board.rows):
        if board.grid[r][center] is Disc.COMPUTER:
            score += CENTER_WEIGHT

    g = board.grid
    for coords in windows(board):
        score += _score_window([g[r][c] for (r, c) in coords])

    return score
