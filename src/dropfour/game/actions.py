from __future__ import annotations
from typing import Optional

from dropfour.core.board import Board
from dropfour.types import Disc, Move


def is_legal(board: Board, move: int) -> bool:
    return board.is_legal(move)


def lowest_empty_row(board: Board, move: int) -> Optional[int]:
    return board.lowest_empty_row(move)


def apply_move(board: Board, move: Move, disc: Disc) -> Board:
    return board.apply(move, disc)
