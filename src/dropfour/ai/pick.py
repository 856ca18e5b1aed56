from __future__ import annotations

import random
from typing import Optional

from dropfour.ai.base import Agent
from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.ai.random_agent import RandomAgent
from dropfour.ai.tactical_agent import TacticalAgent
from dropfour.config import MINIMAX_DEPTH
from dropfour.core.board import Board
from dropfour.types import Difficulty, Move


def agent_for(difficulty: Difficulty, rng: Optional[random.Random] = None, depth: int = MINIMAX_DEPTH) -> Agent:
    """
    Easy   -> random column
    Medium -> win / block / random
    Hard   -> minimax with alpha-beta (deterministic, ignores rng)
    """
    rng = rng if rng is not None else random.Random()

    if difficulty is Difficulty.EASY:
        return RandomAgent(name="Easy AI", rng=rng)
    if difficulty is Difficulty.MEDIUM:
        return TacticalAgent(name="Medium AI", rng=rng)
    if difficulty is Difficulty.HARD:
        return MinimaxAgent(name="Hard AI", depth=depth)
    raise ValueError(f"Unknown difficulty: {difficulty!r}")


def choose_move(board: Board, difficulty: Difficulty, rng: Optional[random.Random] = None) -> Move:
    return agent_for(difficulty, rng).choose_move(board)
