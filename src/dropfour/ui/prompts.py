from __future__ import annotations
from typing import Union

from dropfour.types import Move

QUIT = "quit"
RESTART = "restart"

Command = Union[Move, str]


def parse_move(raw: str, cols: int) -> Command:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return QUIT
    if s in {"r", "restart"}:
        return RESTART
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a column number, r or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)
