from __future__ import annotations
import random
from dataclasses import dataclass, field

from dropfour.ai.base import playable_moves
from dropfour.core.board import Board
from dropfour.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board) -> Move:
        moves = playable_moves(board)
        choice = self.rng.choice(moves)
        self.last_info = {"depth": 0, "nodes": 0, "move_col": int(choice) + 1}
        return choice
