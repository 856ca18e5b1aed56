from __future__ import annotations

import random
import time
from typing import Optional

from dropfour.game.controller import GameController, run_game
from dropfour.game.reporting import ScoreReporter
from dropfour.game.state import Session
from dropfour.types import Difficulty


def ask_difficulty(default: Difficulty = Difficulty.MEDIUM) -> Difficulty:
    print("Select difficulty:")
    print("1) Easy   (random moves)        100 pts per win")
    print("2) Medium (wins and blocks)     250 pts per win")
    print("3) Hard   (minimax, depth 4)    500 pts per win")

    choice = input(f"Choice [{default.value}]: ").strip().lower()
    by_number = {"1": Difficulty.EASY, "2": Difficulty.MEDIUM, "3": Difficulty.HARD}
    if not choice:
        return default
    if choice in by_number:
        return by_number[choice]
    try:
        return Difficulty.parse(choice)
    except ValueError:
        print(f"\nInvalid choice. Defaulting to {default.value}.\n")
        return default


def run_menu(
    difficulty: Optional[Difficulty] = None,
    reporter: Optional[ScoreReporter] = None,
    player: str = "player",
    seed: Optional[int] = None,
    start_delay: float = 1.0,
) -> Session:
    diff = difficulty if difficulty is not None else ask_difficulty()
    rng = random.Random(seed)

    print(f"\nStarting Connect 4 on {diff.value.upper()}. You are X and move first.")
    if start_delay > 0:
        time.sleep(start_delay)

    ctrl = GameController(diff, reporter=reporter, rng=rng, player=player)
    return run_game(ctrl)
