from __future__ import annotations

import random
from dataclasses import replace
from typing import Optional

from dropfour.ai.base import Agent
from dropfour.ai.pick import agent_for
from dropfour.config import MINIMAX_DEPTH
from dropfour.game.reporting import LogScoreReporter, ScoreReport, ScoreReporter
from dropfour.game.session import (
    end_session,
    mark_reported,
    play_human_move,
    request_computer_move,
    restart,
    start_session,
)
from dropfour.game.state import Session
from dropfour.types import Difficulty, Disc
from dropfour.ui.effects import ai_thinking
from dropfour.ui.prompts import QUIT, RESTART, parse_move
from dropfour.ui.render import render

PLAY_AGAIN = {"r", "restart", "y", "yes"}
STOP = {"q", "quit", "n", "no"}


class GameController:
    """
    Owns the current Session and the outbound score reporter.
    Every finished game (win or draw) is reported exactly once, and ending the
    sitting mid-game reports the running score once more.
    """

    def __init__(
        self,
        difficulty: Difficulty,
        reporter: Optional[ScoreReporter] = None,
        rng: Optional[random.Random] = None,
        player: str = "player",
        depth: int = MINIMAX_DEPTH,
    ) -> None:
        self.reporter = reporter if reporter is not None else LogScoreReporter()
        self.rng = rng if rng is not None else random.Random()
        self.player = player
        self.depth = depth
        self.session: Session = start_session(difficulty)
        self.agent: Agent = agent_for(difficulty, self.rng, depth)

    @property
    def computer_to_move(self) -> bool:
        return not self.session.is_over and self.session.turn is Disc.COMPUTER

    def human_move(self, column: int) -> Session:
        self.session = play_human_move(self.session, column)
        self._settle()
        return self.session

    def computer_move(self) -> Session:
        self.session = request_computer_move(self.session, agent=self.agent)
        self._settle()
        return self.session

    def restart(self, difficulty: Optional[Difficulty] = None) -> Session:
        self.session = restart(self.session, difficulty)
        self.agent = agent_for(self.session.difficulty, self.rng, self.depth)
        return self.session

    def end(self) -> Session:
        """Close the sitting, reporting the running score unless this game already was."""
        if not self.session.reported:
            self.reporter.report(ScoreReport.from_session(self.session, self.player))
        self.session = end_session(self.session)
        return self.session

    def _settle(self) -> None:
        if not self.session.is_over or self.session.reported:
            return
        self.reporter.report(ScoreReport.from_session(self.session, self.player))
        self.session = mark_reported(self.session)


def _status(ctrl: GameController) -> str:
    s = ctrl.session
    header = f"{s.difficulty.value.upper()} | Score: {s.score} | Games: {s.games_played}"
    info = getattr(ctrl.agent, "last_info", None)
    line = s.last_status
    if info and s.last_move is not None and s.turn is Disc.HUMAN and not s.is_over:
        bits = [f"{k}={info[k]}" for k in ("depth", "nodes", "cutoffs", "eval", "time_ms") if k in info]
        if bits:
            line = f"{line} ({' '.join(bits)})"
    return f"{header}\n{line}"


def run_game(ctrl: GameController, show_thinking: bool = True) -> Session:
    while True:
        s = ctrl.session
        render(s.board, _status(ctrl), highlight=s.outcome.line or None)

        if s.is_over:
            raw = input("r = play again, q = quit: ").strip().lower()
            if raw in PLAY_AGAIN:
                ctrl.restart()
                continue
            if raw in STOP:
                return ctrl.end()
            ctrl.session = _with_status(s, "Enter r to play again or q to quit.")
            continue

        if ctrl.computer_to_move:
            if show_thinking:
                ai_thinking(ctrl.agent.name)
            ctrl.computer_move()
            continue

        try:
            cmd = parse_move(input("Your move: "), s.board.cols)
            if cmd == QUIT:
                return ctrl.end()
            if cmd == RESTART:
                ctrl.restart()
                continue
            ctrl.human_move(int(cmd))
        except ValueError as e:
            # IllegalMoveError is a ValueError too; show it and ask again
            ctrl.session = _with_status(ctrl.session, str(e))


def _with_status(session: Session, status: str) -> Session:
    return replace(session, last_status=status)
