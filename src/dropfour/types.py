# src/dropfour/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType, Tuple

Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col)


class Disc(str, Enum):
    EMPTY = "."
    HUMAN = "X"
    COMPUTER = "O"

    @property
    def opponent(self) -> "Disc":
        if self is Disc.HUMAN:
            return Disc.COMPUTER
        if self is Disc.COMPUTER:
            return Disc.HUMAN
        raise ValueError("Empty cell has no opponent.")


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, raw: str) -> "Difficulty":
        s = raw.strip().lower()
        for d in cls:
            if s in {d.value, d.value[0]}:
                return d
        raise ValueError(f"Unknown difficulty: {raw!r}. Choose easy, medium or hard.")
