"""Payload handed to the persistence layer once a session has finished."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quiz_session.core.models import SessionStatus, SessionSummary


class QuizSessionRecord(BaseModel):
    """Row written to the quiz_sessions store; dumps with camelCase keys by alias."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    user_id: str
    exam_category_id: str | None = None
    questions_answered: int = Field(ge=0)
    correct_answers: int = Field(ge=0)
    total_questions: int = Field(ge=1)
    points_earned: int = Field(ge=0)
    xp_earned: int = Field(ge=0)
    time_spent: int = Field(ge=0, description="Whole seconds.")
    status: SessionStatus
    is_completed: bool
    accuracy_percent: int = Field(ge=0, le=100)
    completed_at: datetime


def build_session_record(
    summary: SessionSummary,
    user_id: str,
    exam_category_id: str | None = None,
    completed_at: datetime | None = None,
) -> QuizSessionRecord:
    return QuizSessionRecord(
        user_id=user_id,
        exam_category_id=exam_category_id,
        questions_answered=summary.answered,
        correct_answers=summary.correct,
        total_questions=summary.total_questions,
        points_earned=summary.score,
        xp_earned=summary.xp_gained,
        time_spent=int(summary.elapsed_seconds),
        status=summary.status,
        is_completed=summary.status is SessionStatus.COMPLETED,
        accuracy_percent=round(summary.accuracy * 100),
        completed_at=completed_at or datetime.now(timezone.utc),
    )
