from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import time

from dropfour.core.board import Board
from dropfour.game.results import IN_PROGRESS, Outcome
from dropfour.types import Difficulty, Disc, Move


@dataclass(frozen=True, slots=True)
class Session:
    """
    One player's sitting at the Connect 4 table.

    Sessions are values: every operation in `dropfour.game.session` returns a
    new Session and leaves its argument alone. `score` accumulates across
    restarts while `earned` holds the points from the current game only;
    `reported` tracks whether the current game's result has been handed to
    the score reporter.
    """
    board: Board
    difficulty: Difficulty
    turn: Disc = Disc.HUMAN
    outcome: Outcome = IN_PROGRESS
    score: int = 0
    earned: int = 0
    human_moves: int = 0
    games_played: int = 0
    last_move: Optional[Move] = None
    reported: bool = False
    started_at: float = field(default_factory=time.time)
    last_status: str = "You play X. Drop a disc to start."

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def total_moves(self) -> int:
        return self.board.disc_count()
