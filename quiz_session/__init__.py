"""Quiz session engine: scored, timed, life-limited quiz attempts."""

from .core.errors import (
    InvalidAnswerError,
    InvalidConfigurationError,
    QuizSessionError,
    SessionNotTerminatedError,
    SessionTerminatedError,
)
from .core.models import (
    AnswerFeedback,
    AnswerOutcome,
    EvaluationResult,
    Question,
    SessionState,
    SessionStatus,
    SessionSummary,
)
from .core.services.answer_evaluator import evaluate
from .core.services.session_machine import advance_clock, create, skip, submit_answer
from .core.services.termination import check_termination, summarize
from .core.session_config import SessionConfig
from .core.session_manager import QuizSessionManager

__all__ = [
    "AnswerFeedback",
    "AnswerOutcome",
    "EvaluationResult",
    "InvalidAnswerError",
    "InvalidConfigurationError",
    "Question",
    "QuizSessionError",
    "QuizSessionManager",
    "SessionConfig",
    "SessionNotTerminatedError",
    "SessionState",
    "SessionStatus",
    "SessionSummary",
    "SessionTerminatedError",
    "advance_clock",
    "check_termination",
    "create",
    "evaluate",
    "skip",
    "submit_answer",
    "summarize",
]
