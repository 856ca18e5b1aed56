from __future__ import annotations
from typing import Optional, Iterable, Set

from dropfour import config
from dropfour.core.board import Board
from dropfour.types import Coord
from dropfour.ui.colors import c, disc, BOLD, DIM, FG_CYAN


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = [disc(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   Enter 1-{board.cols} to drop, r to restart, q to quit.", DIM))
