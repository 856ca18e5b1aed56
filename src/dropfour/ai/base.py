from __future__ import annotations
from typing import List, Protocol

from dropfour.core.board import Board
from dropfour.core.rules import check_winner
from dropfour.errors import InvalidInvocationError
from dropfour.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, board: Board) -> Move:
        ...


def playable_moves(board: Board) -> List[Move]:
    """
    Legal columns for an AI turn. Asking an agent to move on a finished board
    is a bug in the caller, not a game situation.
    """
    w = check_winner(board)
    if w is not None:
        raise InvalidInvocationError(f"Game is already won by {w.name.lower()}.")
    moves = board.valid_moves()
    if not moves:
        raise InvalidInvocationError("No valid moves: the board is full.")
    return moves
