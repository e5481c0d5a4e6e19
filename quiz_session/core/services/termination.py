"""Terminal-state detection and end-of-session aggregation."""

from __future__ import annotations

from dataclasses import replace
import logging

from quiz_session.constants.session_constants import PERFECT_ANSWER_SECONDS
from quiz_session.core.errors import SessionNotTerminatedError
from quiz_session.core.models import SessionState, SessionStatus, SessionSummary

logger = logging.getLogger(__name__)


def check_termination(state: SessionState) -> SessionState:
    """Move ``state`` into a terminal status if one applies.

    Order matters: running out of lives wins over finishing the last
    question, and both win over the clock.
    """
    if state.is_terminal:
        return state

    status: SessionStatus | None = None
    if state.lives == 0:
        status = SessionStatus.FAILED_OUT_OF_LIVES
    elif state.current_index == len(state.questions):
        status = SessionStatus.COMPLETED
    elif (
        state.time_limit_seconds is not None
        and state.elapsed_seconds >= state.time_limit_seconds
    ):
        status = SessionStatus.TIMED_OUT

    if status is None:
        return state

    logger.info(
        "Session finished with status %s after %d/%d questions (score=%d, lives=%d).",
        status.value,
        state.current_index,
        len(state.questions),
        state.score,
        state.lives,
    )
    return replace(state, status=status)


def summarize(state: SessionState) -> SessionSummary:
    """Aggregate the answer log of a terminated session."""
    if not state.is_terminal:
        raise SessionNotTerminatedError("Cannot summarize a session that is still in progress.")

    log = state.answer_log
    answered = [outcome for outcome in log if not outcome.is_skipped]
    correct = [outcome for outcome in answered if outcome.is_correct]

    return SessionSummary(
        score=sum(outcome.points_awarded for outcome in log),
        answered=len(answered),
        correct=len(correct),
        skipped=len(log) - len(answered),
        accuracy=len(correct) / len(answered) if answered else 0.0,
        elapsed_seconds=state.elapsed_seconds,
        status=state.status,
        answer_log=log,
        total_questions=len(state.questions),
        xp_gained=sum(outcome.xp_awarded for outcome in log),
        best_streak=max((outcome.streak_after for outcome in log), default=0),
        lives_remaining=state.max_lives - sum(outcome.lives_lost for outcome in log),
        average_seconds_per_question=state.elapsed_seconds / max(len(log), 1),
        perfect_answers=sum(
            1 for outcome in correct if outcome.time_spent_seconds < PERFECT_ANSWER_SECONDS
        ),
    )


def progress_percentage(state: SessionState) -> int:
    """Share of questions already answered or skipped, as a rounded percentage."""
    if not state.questions:
        return 0
    return round(state.current_index / len(state.questions) * 100)
