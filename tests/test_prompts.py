import pytest

from dropfour.types import Difficulty, Disc
from dropfour.ui.prompts import QUIT, RESTART, parse_move
from dropfour.ui.render import board_lines


@pytest.mark.parametrize("raw, expected", [("1", 0), (" 7 ", 6), ("4\n", 3)])
def test_columns_are_one_based(raw, expected):
    assert parse_move(raw, 7) == expected


@pytest.mark.parametrize("raw", ["q", "QUIT", "exit"])
def test_quit(raw):
    assert parse_move(raw, 7) == QUIT


def test_restart():
    assert parse_move("r", 7) == RESTART


@pytest.mark.parametrize("raw", ["", "x", "-1", "0", "8"])
def test_invalid(raw):
    with pytest.raises(ValueError):
        parse_move(raw, 7)


@pytest.mark.parametrize("raw, expected", [("easy", Difficulty.EASY), ("M", Difficulty.MEDIUM), (" hard ", Difficulty.HARD)])
def test_parse_difficulty(raw, expected):
    assert Difficulty.parse(raw) is expected


def test_parse_difficulty_rejects_unknown():
    with pytest.raises(ValueError):
        Difficulty.parse("nightmare")


def test_board_lines(empty_board):
    lines = board_lines(empty_board.apply(3, Disc.HUMAN))
    assert len(lines) == 8
    assert lines[0].strip() == "1 2 3 4 5 6 7"
    assert "X" in lines[6]
