"""Session values: turn order, scoring and restart."""

import dataclasses
import random

import pytest

from conftest import DRAW_ROWS
from dropfour.ai.tactical_agent import TacticalAgent
from dropfour.core.board import Board
from dropfour.errors import ColumnFullError, IllegalMoveError, InvalidInvocationError
from dropfour.game.results import Outcome, Status
from dropfour.game.session import (
    end_session,
    play_human_move,
    points_for,
    request_computer_move,
    restart,
    start_session,
)
from dropfour.game.state import Session
from dropfour.types import Difficulty, Disc

EMPTY_TOP = ["......."] * 4

# Human to move, column 3 completes the bottom row
HUMAN_WINS_NEXT = Board.from_rows(EMPTY_TOP + [
    "OOO....",
    "XXX....",
])

# Computer to move, column 3 completes the bottom row
COMPUTER_WINS_NEXT = Board.from_rows(EMPTY_TOP + [
    "XX.....",
    "OOO...X",
])


def _draw_minus_top_left() -> Board:
    rows = list(DRAW_ROWS)
    rows[0] = "." + rows[0][1:]
    return Board.from_rows(rows)


class TestStart:
    def test_fresh_session(self):
        s = start_session(Difficulty.HARD)
        assert s.board.disc_count() == 0
        assert s.turn is Disc.HUMAN
        assert s.outcome.status is Status.IN_PROGRESS
        assert s.score == 0
        assert s.difficulty is Difficulty.HARD
        assert not s.reported

    def test_sessions_are_frozen(self):
        s = start_session(Difficulty.EASY)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.score = 10


class TestTurns:
    def test_human_move_returns_new_session(self):
        s0 = start_session(Difficulty.MEDIUM)
        s1 = play_human_move(s0, 3)
        assert s0.board.disc_count() == 0
        assert s0.turn is Disc.HUMAN
        assert s1.board.cell(5, 3) is Disc.HUMAN
        assert s1.turn is Disc.COMPUTER
        assert s1.human_moves == 1
        assert s1.last_move == 3

    def test_turns_alternate(self):
        s = play_human_move(start_session(Difficulty.EASY), 0)
        s = request_computer_move(s, random.Random(5))
        assert s.turn is Disc.HUMAN
        assert s.board.disc_count() == 2
        assert s.total_moves == 2

    def test_human_cannot_move_twice(self):
        s = play_human_move(start_session(Difficulty.EASY), 0)
        with pytest.raises(IllegalMoveError):
            play_human_move(s, 1)

    def test_computer_cannot_move_on_human_turn(self):
        with pytest.raises(InvalidInvocationError):
            request_computer_move(start_session(Difficulty.EASY))

    def test_full_column_rejected(self):
        b = Board.from_rows([
            "X......",
            "O......",
            "X......",
            "O......",
            "X......",
            "O......",
        ])
        s = Session(board=b, difficulty=Difficulty.MEDIUM)
        with pytest.raises(ColumnFullError):
            play_human_move(s, 0)
        assert s.board.to_rows() == b.to_rows()
        assert s.turn is Disc.HUMAN

    def test_out_of_range_rejected(self):
        with pytest.raises(IllegalMoveError):
            play_human_move(start_session(Difficulty.MEDIUM), 7)


class TestGameEnd:
    @pytest.mark.parametrize(
        "difficulty, points",
        [(Difficulty.EASY, 100), (Difficulty.MEDIUM, 250), (Difficulty.HARD, 500)],
    )
    def test_human_win_scores_by_difficulty(self, difficulty, points):
        s = Session(board=HUMAN_WINS_NEXT, difficulty=difficulty, score=40)
        s = play_human_move(s, 3)
        assert s.outcome.status is Status.WIN
        assert s.outcome.winner is Disc.HUMAN
        assert s.score == 40 + points
        assert s.games_played == 1
        assert s.is_over

    def test_nothing_allowed_after_game_over(self):
        s = play_human_move(Session(board=HUMAN_WINS_NEXT, difficulty=Difficulty.EASY), 3)
        with pytest.raises(IllegalMoveError):
            play_human_move(s, 4)
        with pytest.raises(InvalidInvocationError):
            request_computer_move(s)

    def test_computer_win_scores_nothing(self):
        s = Session(board=COMPUTER_WINS_NEXT, difficulty=Difficulty.HARD, turn=Disc.COMPUTER, score=250)
        s = request_computer_move(s)
        assert s.outcome.winner is Disc.COMPUTER
        assert s.outcome.line == ((5, 0), (5, 1), (5, 2), (5, 3))
        assert s.score == 250
        assert s.is_over

    def test_injected_agent_is_used(self):
        s = Session(board=COMPUTER_WINS_NEXT, difficulty=Difficulty.EASY, turn=Disc.COMPUTER)
        s = request_computer_move(s, agent=TacticalAgent())
        assert s.last_move == 3
        assert s.outcome.winner is Disc.COMPUTER

    def test_draw(self):
        s = Session(board=_draw_minus_top_left(), difficulty=Difficulty.MEDIUM)
        s = play_human_move(s, 0)
        assert s.outcome.status is Status.DRAW
        assert s.score == 0
        assert s.games_played == 1

    def test_points_table(self):
        human = Outcome(Status.WIN, Disc.HUMAN)
        computer = Outcome(Status.WIN, Disc.COMPUTER)
        assert points_for(human, Difficulty.HARD) == 500
        assert points_for(computer, Difficulty.HARD) == 0
        assert points_for(Outcome(Status.DRAW), Difficulty.HARD) == 0


class TestRestart:
    def test_keeps_score_and_clears_board(self):
        s = play_human_move(Session(board=HUMAN_WINS_NEXT, difficulty=Difficulty.MEDIUM), 3)
        assert s.earned == 250
        s2 = restart(s)
        assert s2.score == 250
        assert s2.earned == 0
        assert s2.games_played == 1
        assert s2.board.disc_count() == 0
        assert s2.turn is Disc.HUMAN
        assert s2.human_moves == 0
        assert not s2.is_over
        assert not s2.reported

    def test_difficulty_changes_only_on_restart(self):
        s = play_human_move(start_session(Difficulty.EASY), 3)
        assert s.difficulty is Difficulty.EASY
        s2 = restart(s, Difficulty.HARD)
        assert s2.difficulty is Difficulty.HARD
        assert restart(s2).difficulty is Difficulty.HARD


class TestEndSession:
    def test_marks_reported_and_keeps_score(self):
        s = play_human_move(Session(board=HUMAN_WINS_NEXT, difficulty=Difficulty.HARD), 3)
        s = play_human_move(restart(s), 0)

        ended = end_session(s)
        assert ended.reported
        assert ended.score == 500
        assert ended.board == s.board
        assert not s.reported
