"""Encouragement messages shown after each answer."""

from __future__ import annotations

import random

from quiz_session.core.models import AnswerFeedback, Question, SessionState

SUCCESS_MESSAGES: tuple[str, ...] = (
    "Harika!",
    "Mükemmel!",
    "Süper!",
    "Bravo!",
    "Çok iyi!",
    "Doğru!",
    "İnanılmaz!",
    "Muhteşem!",
)

FAILURE_MESSAGES: tuple[str, ...] = (
    "Bir daha dene!",
    "Neredeyse!",
    "Devam et!",
    "Pes etme!",
    "Bir dahaki sefere!",
    "Pratik yapalım!",
)

_default_rng = random.Random()


def pick_message(is_correct: bool, rng: random.Random | None = None) -> str:
    messages = SUCCESS_MESSAGES if is_correct else FAILURE_MESSAGES
    return (rng or _default_rng).choice(messages)


def build_feedback(
    question: Question,
    state: SessionState,
    rng: random.Random | None = None,
) -> AnswerFeedback:
    """Describe the most recent answer in ``state``, which must be for ``question``."""
    if not state.answer_log:
        raise ValueError("Session has no recorded answers yet.")
    outcome = state.answer_log[-1]
    if outcome.question_id != question.id or outcome.is_skipped:
        raise ValueError(f"Last recorded outcome is not an answer to question {question.id!r}.")

    return AnswerFeedback(
        is_correct=bool(outcome.is_correct),
        message=pick_message(bool(outcome.is_correct), rng),
        explanation=question.explanation,
        xp_gained=outcome.xp_awarded,
        streak_count=outcome.streak_after,
        hearts_lost=outcome.lives_lost,
        state=state,
    )
