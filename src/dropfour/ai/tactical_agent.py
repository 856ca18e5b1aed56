from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from dropfour.ai.base import playable_moves
from dropfour.core.board import Board
from dropfour.core.rules import check_winner
from dropfour.types import Disc, Move


def winning_move(board: Board, moves: List[Move], player: Disc) -> Optional[Move]:
    """Lowest column where dropping `player` completes four in a row, if any."""
    for c in moves:
        if check_winner(board.apply(c, player)) is player:
            return c
    return None


@dataclass(slots=True)
class TacticalAgent:
    """
    One-ply tactical agent:
      1) Play an immediate winning move if available
      2) Block the human's immediate winning move
      3) Otherwise a uniformly random valid move
    """
    name: str = "Tactical AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board) -> Move:
        moves = playable_moves(board)

        m = winning_move(board, moves, Disc.COMPUTER)
        reason = "win"
        if m is None:
            m = winning_move(board, moves, Disc.HUMAN)
            reason = "block"
        if m is None:
            m = self.rng.choice(moves)
            reason = "random"

        logger.debug(f"{self.name} picked column {int(m) + 1} ({reason})")
        self.last_info = {
            "depth": 1,
            "nodes": 2 * len(moves),
            "reason": reason,
            "move_col": int(m) + 1,
        }
        return m
