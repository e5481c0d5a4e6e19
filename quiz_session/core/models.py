"""Domain models for quiz sessions."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum

from quiz_session.constants.session_constants import (
    DEFAULT_QUESTION_POINTS,
    DIFFICULTY_LEVELS,
)


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question supplied by the question bank."""

    id: str
    subject: str
    difficulty: str
    question_text: str
    options: tuple[str, ...]
    correct_option_index: int
    points: int = DEFAULT_QUESTION_POINTS
    explanation: str | None = None

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as a tuple.
        object.__setattr__(self, "options", tuple(self.options))
        if not self.options:
            raise ValueError(f"Question {self.id!r} must have at least one option.")
        if not 0 <= self.correct_option_index < len(self.options):
            raise ValueError(
                f"Question {self.id!r} has correct option index "
                f"{self.correct_option_index} outside 0..{len(self.options) - 1}."
            )
        if self.difficulty not in DIFFICULTY_LEVELS:
            raise ValueError(
                f"Question {self.id!r} has unknown difficulty {self.difficulty!r}."
            )
        if self.points <= 0:
            raise ValueError(f"Question {self.id!r} must be worth a positive number of points.")


class SessionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED_OUT_OF_LIVES = "failed_out_of_lives"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Scoring decision for a single submitted answer."""

    is_correct: bool
    points_awarded: int
    lives_lost: int
    streak_after: int
    xp_awarded: int = 0


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    """One entry of the session answer log."""

    question_id: str
    subject: str
    selected_option_index: int | None  # None when skipped
    is_correct: bool | None  # None when skipped
    points_awarded: int
    lives_lost: int
    streak_after: int
    answered_at_seconds: float
    time_spent_seconds: float
    xp_awarded: int = 0

    @property
    def is_skipped(self) -> bool:
        return self.is_correct is None


@dataclass(frozen=True, slots=True)
class SessionState:
    """Snapshot of a quiz attempt. Every transition returns a new instance."""

    questions: tuple[Question, ...]
    max_lives: int
    time_limit_seconds: float | None
    lives: int
    current_index: int = 0
    score: int = 0
    xp: int = 0
    streak: int = 0
    best_streak: int = 0
    answer_log: tuple[AnswerOutcome, ...] = ()
    elapsed_seconds: float = 0.0
    status: SessionStatus = SessionStatus.IN_PROGRESS

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question | None:
        if 0 <= self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    @property
    def is_terminal(self) -> bool:
        return self.status is not SessionStatus.IN_PROGRESS

    @property
    def remaining_seconds(self) -> float | None:
        if self.time_limit_seconds is None:
            return None
        return max(0.0, self.time_limit_seconds - self.elapsed_seconds)


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Final result of a terminated session, aggregated from its answer log."""

    score: int
    answered: int
    correct: int
    skipped: int
    accuracy: float
    elapsed_seconds: float
    status: SessionStatus
    answer_log: tuple[AnswerOutcome, ...]
    total_questions: int
    xp_gained: int
    best_streak: int
    lives_remaining: int
    average_seconds_per_question: float
    perfect_answers: int

    def accuracy_by_subject(self) -> dict[str, float]:
        """Return correct/answered per subject; skipped-only subjects report 0.0."""
        answered: dict[str, int] = {}
        correct: dict[str, int] = defaultdict(int)
        for outcome in self.answer_log:
            answered.setdefault(outcome.subject, 0)
            if outcome.is_skipped:
                continue
            answered[outcome.subject] += 1
            if outcome.is_correct:
                correct[outcome.subject] += 1
        return {
            subject: (correct[subject] / count if count else 0.0)
            for subject, count in answered.items()
        }


@dataclass(frozen=True, slots=True)
class AnswerFeedback:
    """What the presentation layer shows right after an answer."""

    is_correct: bool
    message: str
    explanation: str | None
    xp_gained: int
    streak_count: int
    hearts_lost: int
    state: SessionState
