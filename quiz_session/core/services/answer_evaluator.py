"""Scoring rules for a single submitted answer."""

from __future__ import annotations

from quiz_session.constants.session_constants import (
    XP_BASE_MULTIPLIER_TENTHS,
    XP_MAX_MULTIPLIER_TENTHS,
    XP_STREAK_STEP_TENTHS,
)
from quiz_session.core.models import EvaluationResult, Question


def evaluate(question: Question, option_index: int, current_streak: int) -> EvaluationResult:
    """Score ``option_index`` against ``question``.

    Points are the question's flat value with no latency bonus. A wrong
    answer costs one life and resets the streak.
    """
    is_correct = option_index == question.correct_option_index
    if not is_correct:
        return EvaluationResult(
            is_correct=False,
            points_awarded=0,
            lives_lost=1,
            streak_after=0,
            xp_awarded=0,
        )
    return EvaluationResult(
        is_correct=True,
        points_awarded=question.points,
        lives_lost=0,
        streak_after=current_streak + 1,
        xp_awarded=xp_for_correct_answer(question.points, current_streak),
    )


def xp_for_correct_answer(points: int, current_streak: int) -> int:
    """XP earned for a correct answer given the streak held before it."""
    multiplier_tenths = min(
        XP_BASE_MULTIPLIER_TENTHS + current_streak * XP_STREAK_STEP_TENTHS,
        XP_MAX_MULTIPLIER_TENTHS,
    )
    return points * multiplier_tenths // 10
