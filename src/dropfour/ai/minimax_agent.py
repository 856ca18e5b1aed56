from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
from typing import Optional, Tuple
import time

from loguru import logger

from dropfour.ai.base import playable_moves
from dropfour.config import MINIMAX_DEPTH, WIN_SCORE
from dropfour.core.board import Board
from dropfour.core.rules import check_winner
from dropfour.core.scoring import evaluate
from dropfour.types import Disc, Move


@dataclass(slots=True)
class MinimaxAgent:
    """
    Fixed-depth minimax with alpha-beta pruning. The computer maximizes, the human minimizes.

    Columns are tried in ascending order and a later column only replaces the
    current best on a strictly better value, so the choice is deterministic for
    a given board and depth. Terminal scores carry the remaining depth so that
    a quicker win (or a slower loss) outranks an equal one found deeper down.
    Nothing is kept between calls apart from the stats in `last_info`.
    """
    name: str = "Minimax AI"
    depth: int = MINIMAX_DEPTH

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def choose_move(self, board: Board) -> Move:
        moves = playable_moves(board)
        if self.depth < 1:
            raise ValueError("Search depth must be at least 1.")

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        score, best = self._minimax(board, self.depth, -inf, inf, True)
        move = best if best is not None else moves[0]

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": int(score),
            "move_col": int(move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(f"{self.name} search: {self.last_info}")
        return move

    def _terminal_score(self, board: Board, depth: int) -> Optional[float]:
        w = check_winner(board)
        if w is Disc.COMPUTER:
            return float(WIN_SCORE + depth)
        if w is Disc.HUMAN:
            return float(-(WIN_SCORE + depth))
        return None

    def _minimax(
        self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool
    ) -> Tuple[float, Optional[Move]]:
        self._nodes += 1

        term = self._terminal_score(board, depth)
        if term is not None:
            return term, None

        moves = board.valid_moves()
        if not moves:
            return 0.0, None
        if depth == 0:
            return float(evaluate(board)), None

        best_move = moves[0]

        if maximizing:
            v = -inf
            for m in moves:
                child, _ = self._minimax(board.apply(m, Disc.COMPUTER), depth - 1, alpha, beta, False)
                if child > v:
                    v, best_move = child, m
                alpha = max(alpha, v)
                if alpha >= beta:
                    self._cutoffs += 1
                    break
            return v, best_move

        v = inf
        for m in moves:
            child, _ = self._minimax(board.apply(m, Disc.HUMAN), depth - 1, alpha, beta, True)
            if child < v:
                v, best_move = child, m
            beta = min(beta, v)
            if alpha >= beta:
                self._cutoffs += 1
                break
        return v, best_move
