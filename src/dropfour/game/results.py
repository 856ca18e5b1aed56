from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from dropfour.core.board import Board
from dropfour.core.rules import check_winner_with_line
from dropfour.types import Coord, Disc


class Status(str, Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status = Status.IN_PROGRESS
    winner: Optional[Disc] = None
    line: Tuple[Coord, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def label(self) -> str:
        if self.status is Status.WIN and self.winner is Disc.HUMAN:
            return "human_win"
        if self.status is Status.WIN:
            return "computer_win"
        if self.status is Status.DRAW:
            return "draw"
        return "in_progress"


IN_PROGRESS = Outcome()


def outcome(board: Board) -> Outcome:
    w = check_winner_with_line(board)
    if w is not None:
        player, line = w
        return Outcome(Status.WIN, player, tuple(line))
    if board.is_full():
        return Outcome(Status.DRAW)
    return IN_PROGRESS
