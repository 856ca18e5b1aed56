from __future__ import annotations

import random
from dataclasses import replace
from typing import Optional

from loguru import logger

from dropfour.ai.base import Agent
from dropfour.ai.pick import agent_for
from dropfour.config import DIFFICULTY_POINTS
from dropfour.core.board import Board
from dropfour.errors import IllegalMoveError, InvalidInvocationError
from dropfour.game.results import Outcome, Status, outcome
from dropfour.game.state import Session
from dropfour.types import Difficulty, Disc, Move


def points_for(result: Outcome, difficulty: Difficulty) -> int:
    """Points only come from beating the AI; losses and draws earn nothing."""
    if result.status is Status.WIN and result.winner is Disc.HUMAN:
        return DIFFICULTY_POINTS[difficulty.value]
    return 0


def _status_line(result: Outcome, next_turn: Disc, mover: Disc, move: Move) -> str:
    who = "You" if mover is Disc.HUMAN else "AI"
    if result.status is Status.WIN:
        return "You win!" if result.winner is Disc.HUMAN else "AI wins!"
    if result.status is Status.DRAW:
        return "Draw game."
    nxt = "Your turn." if next_turn is Disc.HUMAN else "AI to move."
    return f"{who} played {int(move) + 1}. {nxt}"


def _advance(session: Session, move: Move, mover: Disc) -> Session:
    board = session.board.apply(move, mover)
    result = outcome(board)

    earned = points_for(result, session.difficulty)
    next_turn = mover if result.is_terminal else mover.opponent

    nxt = replace(
        session,
        board=board,
        turn=next_turn,
        outcome=result,
        score=session.score + earned,
        earned=session.earned + earned,
        human_moves=session.human_moves + (1 if mover is Disc.HUMAN else 0),
        games_played=session.games_played + (1 if result.is_terminal else 0),
        last_move=move,
        last_status=_status_line(result, next_turn, mover, move),
    )

    if result.is_terminal:
        logger.info(
            f"Game over ({session.difficulty.value}): {result.label()} "
            f"after {board.disc_count()} moves, +{earned} points, session score {nxt.score}"
        )
    return nxt


def start_session(difficulty: Difficulty) -> Session:
    logger.info(f"Starting Connect 4 session on {difficulty.value}")
    return Session(board=Board(), difficulty=difficulty)


def play_human_move(session: Session, column: int) -> Session:
    if session.is_over:
        raise IllegalMoveError("Game is over. Restart to play again.", column)
    if session.turn is not Disc.HUMAN:
        raise IllegalMoveError("Wait for the AI to move.", column)

    try:
        return _advance(session, Move(column), Disc.HUMAN)
    except IllegalMoveError as e:
        logger.warning(f"Rejected human move {column}: {e}")
        raise


def request_computer_move(
    session: Session,
    rng: Optional[random.Random] = None,
    agent: Optional[Agent] = None,
) -> Session:
    if session.is_over:
        raise InvalidInvocationError("Computer move requested on a finished game.")
    if session.turn is not Disc.COMPUTER:
        raise InvalidInvocationError("Computer move requested on the human's turn.")

    agent = agent if agent is not None else agent_for(session.difficulty, rng)
    move = agent.choose_move(session.board)
    return _advance(session, move, Disc.COMPUTER)


def restart(session: Session, difficulty: Optional[Difficulty] = None) -> Session:
    """
    Fresh board, same running score. This is the only place the difficulty can
    change, so the AI never switches strategy in the middle of a game.
    """
    diff = difficulty if difficulty is not None else session.difficulty
    if diff is not session.difficulty:
        logger.info(f"Difficulty changed {session.difficulty.value} -> {diff.value}")
    return Session(
        board=Board(),
        difficulty=diff,
        score=session.score,
        games_played=session.games_played,
        last_status="New game. Your turn.",
    )


def end_session(session: Session) -> Session:
    """
    Close the sitting. The caller reports the running score first unless the
    current game was already reported; the returned session is marked reported
    so a second end does not report again.
    """
    if not session.is_over and session.board.disc_count():
        logger.info(f"Game abandoned after {session.board.disc_count()} moves ({session.difficulty.value})")
    logger.info(f"Session closed: {session.games_played} games, final score {session.score}")
    return replace(session, reported=True, last_status="Session ended.")


def mark_reported(session: Session) -> Session:
    return replace(session, reported=True)
