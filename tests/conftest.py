import random

import matplotlib
import pytest

matplotlib.use("Agg")

from dropfour import config
from dropfour.core.board import Board


# Full board, no four-in-a-row anywhere: rows alternate a 2-2-2-1 pattern and its complement.
DRAW_ROWS = [
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
]


class FirstChoice(random.Random):
    """Random source that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


class LastChoice(random.Random):
    """Random source that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def draw_board():
    return Board.from_rows(DRAW_ROWS)


@pytest.fixture(autouse=True)
def quiet_ui(monkeypatch):
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)
