# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from dropfour.config import ROWS, COLS
from dropfour.errors import ColumnFullError, IllegalMoveError
from dropfour.types import Disc, Move


@dataclass(slots=True)
class Board:
    """
    Row 0 is the top of the board, row `rows - 1` the bottom.
    Boards are treated as values: `apply` hands back a new board and leaves
    this one untouched, so search code can branch freely off the real game.
    """
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Disc]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Disc.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, lines: Sequence[str]) -> "Board":
        """
        Build a board from text, top row first. `.` is empty, `X` human, `O` computer.
        Whitespace inside a line is ignored.
        """
        grid = [[Disc(ch) for ch in line if not ch.isspace()] for line in lines]
        rows = len(grid)
        cols = len(grid[0]) if grid else 0
        if rows == 0 or any(len(r) != cols for r in grid):
            raise ValueError("Board rows must be non-empty and equally long.")
        return cls(rows, cols, grid)

    def to_rows(self) -> List[str]:
        return ["".join(cell.value for cell in row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [row[:] for row in self.grid])

    def cell(self, r: int, c: int) -> Disc:
        return self.grid[r][c]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_legal(self, col: int) -> bool:
        return 0 <= col < self.cols and self.grid[0][col] is Disc.EMPTY

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is Disc.EMPTY]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not Disc.EMPTY for c in range(self.cols))

    def disc_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not Disc.EMPTY)

    def lowest_empty_row(self, col: int) -> Optional[int]:
        if col < 0 or col >= self.cols:
            return None
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is Disc.EMPTY:
                return r
        return None

    def apply(self, col: Move, disc: Disc) -> "Board":
        c = int(col)
        if c < 0 or c >= self.cols:
            raise IllegalMoveError(f"Column must be between 1 and {self.cols}.", c)
        if disc is Disc.EMPTY:
            raise ValueError("Cannot drop an empty disc.")

        r = self.lowest_empty_row(c)
        if r is None:
            raise ColumnFullError(c)

        b = self.copy()
        b.grid[r][c] = disc
        return b
