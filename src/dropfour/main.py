from __future__ import annotations

import argparse
from typing import List, Optional

from loguru import logger

from dropfour import config
from dropfour.game.reporting import CsvScoreReporter, LogScoreReporter, MultiReporter, ScoreReporter
from dropfour.logs import configure_logging
from dropfour.types import Difficulty
from dropfour.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour", description="Play Connect 4 against the arcade AI.")
    ap.add_argument("-d", "--difficulty", type=str, default=None, help="easy, medium or hard. Prompts if omitted.")
    ap.add_argument("--player", type=str, default="player", help="Name recorded with submitted scores")
    ap.add_argument("--results", type=str, default=config.RESULTS_CSV, help="CSV file that finished games are appended to")
    ap.add_argument("--no-results", action="store_true", help="Do not write finished games to CSV")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the Easy/Medium AI")
    ap.add_argument("--no-color", action="store_true", help="Plain output without ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--think-delay", type=float, default=config.AI_THINK_DELAY_SEC, help="Seconds of AI 'thinking' spinner (0 disables)")
    ap.add_argument("--log-dir", type=str, default=config.LOG_DIR, help="Directory for log files")
    ap.add_argument("-v", "--verbose", action="store_true", help="Also log to stderr at DEBUG level")
    return ap


def _reporter(args: argparse.Namespace) -> ScoreReporter:
    if args.no_results:
        return LogScoreReporter()
    return MultiReporter([LogScoreReporter(), CsvScoreReporter(args.results)])


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    config.USE_COLOR = not args.no_color
    config.CLEAR_SCREEN = not args.no_clear
    config.AI_THINK_DELAY_SEC = max(0.0, args.think_delay)
    config.LOG_DIR = args.log_dir
    configure_logging(verbose=args.verbose)

    try:
        difficulty = Difficulty.parse(args.difficulty) if args.difficulty else None
    except ValueError as e:
        print(e)
        return 2

    try:
        session = run_menu(
            difficulty,
            reporter=_reporter(args),
            player=args.player,
            seed=args.seed,
            start_delay=config.AI_THINK_DELAY_SEC,
        )
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
        return 130

    print(f"\nFinal score: {session.score} over {session.games_played} game(s).")
    logger.info(f"Exit with score {session.score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
