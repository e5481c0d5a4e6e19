"""State transitions for a single quiz attempt.

Every function takes a ``SessionState`` and returns a new one; nothing is
mutated in place, so callers may keep earlier states as snapshots for undo,
replay or incremental upload. The engine has no clock of its own: elapsed
time only moves through :func:`advance_clock`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
import logging
import math

from quiz_session.core.errors import (
    InvalidAnswerError,
    InvalidConfigurationError,
    SessionTerminatedError,
)
from quiz_session.core.models import AnswerOutcome, Question, SessionState
from quiz_session.core.services.answer_evaluator import evaluate
from quiz_session.core.services.termination import check_termination
from quiz_session.core.session_config import SessionConfig, resolve_config

logger = logging.getLogger(__name__)


def create(
    questions: Sequence[Question],
    config: SessionConfig | Mapping[str, object] | None = None,
) -> SessionState:
    """Start a new session over ``questions`` in the order given."""
    if not questions:
        raise InvalidConfigurationError("A quiz session needs at least one question.")
    settings = resolve_config(config)
    state = SessionState(
        questions=tuple(questions),
        max_lives=settings.max_lives,
        time_limit_seconds=settings.time_limit_seconds,
        lives=settings.max_lives,
    )
    logger.debug(
        "Created session with %d questions (max_lives=%d, time_limit=%s).",
        len(state.questions),
        state.max_lives,
        state.time_limit_seconds,
    )
    return state


def submit_answer(state: SessionState, option_index: int) -> SessionState:
    """Score the answer to the current question and move on."""
    _ensure_in_progress(state)
    question = state.current_question
    if question is None:  # pragma: no cover - unreachable while in progress
        raise SessionTerminatedError("No current question available.")
    if (
        isinstance(option_index, bool)
        or not isinstance(option_index, int)
        or not 0 <= option_index < len(question.options)
    ):
        raise InvalidAnswerError(
            f"Option index {option_index!r} is outside 0..{len(question.options) - 1} "
            f"for question {question.id!r}."
        )

    result = evaluate(question, option_index, state.streak)
    outcome = AnswerOutcome(
        question_id=question.id,
        subject=question.subject,
        selected_option_index=option_index,
        is_correct=result.is_correct,
        points_awarded=result.points_awarded,
        lives_lost=result.lives_lost,
        streak_after=result.streak_after,
        answered_at_seconds=state.elapsed_seconds,
        time_spent_seconds=_time_since_last_outcome(state),
        xp_awarded=result.xp_awarded,
    )
    logger.debug(
        "Question %s answered with option %d (correct=%s).",
        question.id,
        option_index,
        result.is_correct,
    )
    next_state = replace(
        state,
        current_index=state.current_index + 1,
        score=state.score + result.points_awarded,
        xp=state.xp + result.xp_awarded,
        lives=max(0, state.lives - result.lives_lost),
        streak=result.streak_after,
        best_streak=max(state.best_streak, result.streak_after),
        answer_log=state.answer_log + (outcome,),
    )
    return check_termination(next_state)


def skip(state: SessionState) -> SessionState:
    """Pass on the current question without touching score, lives or streak."""
    _ensure_in_progress(state)
    question = state.current_question
    if question is None:  # pragma: no cover - unreachable while in progress
        raise SessionTerminatedError("No current question available.")

    outcome = AnswerOutcome(
        question_id=question.id,
        subject=question.subject,
        selected_option_index=None,
        is_correct=None,
        points_awarded=0,
        lives_lost=0,
        streak_after=state.streak,
        answered_at_seconds=state.elapsed_seconds,
        time_spent_seconds=_time_since_last_outcome(state),
    )
    logger.debug("Question %s skipped.", question.id)
    next_state = replace(
        state,
        current_index=state.current_index + 1,
        answer_log=state.answer_log + (outcome,),
    )
    return check_termination(next_state)


def advance_clock(state: SessionState, delta_seconds: float) -> SessionState:
    """Add ``delta_seconds`` of elapsed time and check the time limit."""
    _ensure_in_progress(state)
    if not math.isfinite(delta_seconds) or delta_seconds < 0:
        raise ValueError(
            f"Clock delta must be a finite, non-negative number, got {delta_seconds!r}."
        )
    return check_termination(replace(state, elapsed_seconds=state.elapsed_seconds + delta_seconds))


def _ensure_in_progress(state: SessionState) -> None:
    if state.is_terminal:
        raise SessionTerminatedError(
            f"Session already finished with status {state.status.value!r}."
        )


def _time_since_last_outcome(state: SessionState) -> float:
    if not state.answer_log:
        return state.elapsed_seconds
    return state.elapsed_seconds - state.answer_log[-1].answered_at_seconds
