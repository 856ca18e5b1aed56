from __future__ import annotations

import csv
import time
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Iterable, List, Protocol

from loguru import logger

from dropfour.config import GAME_TYPE
from dropfour.game.state import Session


@dataclass(frozen=True)
class ScoreReport:
    """
    `score` is the running session total; `earned` is what this game alone added.
    """
    player: str
    score: int
    earned: int
    difficulty: str
    outcome: str
    human_moves: int
    total_moves: int
    duration_sec: float
    games_played: int
    game_type: str = GAME_TYPE
    timestamp: str = ""

    @classmethod
    def from_session(cls, session: Session, player: str = "player", now: float | None = None) -> "ScoreReport":
        end = time.time() if now is None else now
        return cls(
            player=player,
            score=session.score,
            earned=session.earned,
            difficulty=session.difficulty.value,
            outcome=session.outcome.label() if session.is_over else "abandoned",
            human_moves=session.human_moves,
            total_moves=session.total_moves,
            duration_sec=round(max(0.0, end - session.started_at), 3),
            games_played=session.games_played,
            timestamp=time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(end)),
        )


CSV_COLUMNS: List[str] = [f.name for f in fields(ScoreReport)]


class ScoreReporter(Protocol):
    def report(self, report: ScoreReport) -> None:
        ...


class LogScoreReporter:
    def report(self, report: ScoreReport) -> None:
        logger.info(
            f"Final score {report.score} for {report.player} "
            f"({report.difficulty}, {report.outcome}, {report.human_moves} moves)"
        )


class CsvScoreReporter:
    """Appends one row per finished game; writes the header when the file is new."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def report(self, report: ScoreReport) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        new_file = not self.path.exists() or self.path.stat().st_size == 0

        with open(self.path, "a", newline="") as f:
            w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
            if new_file:
                w.writeheader()
            w.writerow(asdict(report))

        logger.debug(f"Appended score row to {self.path}")


class MultiReporter:
    def __init__(self, reporters: Iterable[ScoreReporter]) -> None:
        self.reporters = list(reporters)

    def report(self, report: ScoreReport) -> None:
        for r in self.reporters:
            r.report(report)
