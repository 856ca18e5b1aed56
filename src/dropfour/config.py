# src/dropfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

GAME_TYPE = "connect4"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # short pause so AI moves aren’t instant

# Search
MINIMAX_DEPTH = 4
WIN_SCORE = 100_000

# Static evaluator weights (computer perspective)
CENTER_WEIGHT = 4
WINDOW_FOUR = 100
WINDOW_THREE = 10
WINDOW_TWO = 5
WINDOW_OPP_THREE = -8

# Points added to the session score when the human beats the AI
DIFFICULTY_POINTS = {
    "easy": 100,
    "medium": 250,
    "hard": 500,
}

# Score history + logs
RESULTS_CSV = "data/results/connect4_scores.csv"
LOG_DIR = "logs"
