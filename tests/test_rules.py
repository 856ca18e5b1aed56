"""Win / draw detection."""

import pytest

from dropfour.core.board import Board
from dropfour.core.rules import check_winner, check_winner_with_line, is_draw, is_terminal
from dropfour.game.results import Status, outcome
from dropfour.types import Disc


def board(*rows):
    return Board.from_rows(list(rows))


class TestWinDetection:
    def test_horizontal(self):
        b = board(
            ".......",
            ".......",
            ".......",
            ".......",
            ".OOO...",
            ".XXXX..",
        )
        w, line = check_winner_with_line(b)
        assert w is Disc.HUMAN
        assert line == [(5, 1), (5, 2), (5, 3), (5, 4)]

    def test_vertical(self):
        b = board(
            ".......",
            ".......",
            "......O",
            "......O",
            "X.....O",
            "XX....O",
        )
        w, line = check_winner_with_line(b)
        assert w is Disc.COMPUTER
        assert line == [(2, 6), (3, 6), (4, 6), (5, 6)]

    def test_diagonal_down_right(self):
        b = board(
            ".......",
            ".......",
            "O......",
            "XO.....",
            "XXO....",
            "XXXO...",
        )
        w, line = check_winner_with_line(b)
        assert w is Disc.COMPUTER
        assert line == [(2, 0), (3, 1), (4, 2), (5, 3)]

    def test_diagonal_down_left(self):
        b = board(
            ".......",
            ".......",
            "......X",
            ".....XO",
            "....XOO",
            "...XOOX",
        )
        w, line = check_winner_with_line(b)
        assert w is Disc.HUMAN
        assert line == [(2, 6), (3, 5), (4, 4), (5, 3)]

    def test_win_reported_despite_clutter(self, draw_board):
        # Overwrite a horizontal run inside an otherwise winless full board
        rows = draw_board.to_rows()
        rows[2] = "OOOOXXO"
        w, line = check_winner_with_line(Board.from_rows(rows))
        assert w is Disc.COMPUTER
        assert set(line) <= {(2, c) for c in range(7)}

    def test_three_is_not_a_win(self):
        b = board(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "XXX.OOO",
        )
        assert check_winner(b) is None
        assert outcome(b).status is Status.IN_PROGRESS

    def test_multiple_lines_returns_one(self):
        b = board(
            ".......",
            ".......",
            "X......",
            "X......",
            "X......",
            "XXXX...",
        )
        w, line = check_winner_with_line(b)
        assert w is Disc.HUMAN
        assert len(line) == 4
        assert all(b.cell(r, c) is Disc.HUMAN for r, c in line)


class TestTerminal:
    def test_full_board_without_line_is_draw(self, draw_board):
        assert draw_board.is_full()
        assert check_winner(draw_board) is None
        assert is_draw(draw_board)
        assert is_terminal(draw_board)
        res = outcome(draw_board)
        assert res.status is Status.DRAW
        assert res.winner is None
        assert res.is_terminal

    def test_empty_board_in_progress(self, empty_board):
        res = outcome(empty_board)
        assert res.status is Status.IN_PROGRESS
        assert not res.is_terminal
        assert not is_draw(empty_board)
        assert not is_terminal(empty_board)

    @pytest.mark.parametrize(
        "winner, label",
        [(Disc.HUMAN, "human_win"), (Disc.COMPUTER, "computer_win")],
    )
    def test_outcome_carries_line(self, winner, label):
        ch = winner.value
        b = board(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            f"{ch * 4}...",
        )
        res = outcome(b)
        assert res.status is Status.WIN
        assert res.winner is winner
        assert res.line == ((5, 0), (5, 1), (5, 2), (5, 3))
        assert res.label() == label
