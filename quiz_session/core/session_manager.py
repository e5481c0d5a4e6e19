"""Facade that owns active quiz sessions for callers such as request handlers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
import logging
import random
from threading import Lock
from uuid import uuid4

from quiz_session.core.errors import InvalidConfigurationError
from quiz_session.core.feedback_messages import build_feedback
from quiz_session.core.models import (
    AnswerFeedback,
    Question,
    SessionState,
    SessionSummary,
)
from quiz_session.core.services import session_machine
from quiz_session.core.services.question_bank import QuestionBank
from quiz_session.core.services.termination import summarize
from quiz_session.core.session_config import SessionConfig

logger = logging.getLogger(__name__)

SummarySink = Callable[[str, SessionSummary], None]


@dataclass(slots=True)
class _ActiveSession:
    user_id: str
    state: SessionState


class QuizSessionManager:
    """Facade over the question bank and the session state machine."""

    def __init__(
        self,
        question_bank: QuestionBank | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = Lock()
        self._bank = question_bank or QuestionBank()
        self._sessions: dict[str, _ActiveSession] = {}
        self._sinks: list[SummarySink] = []
        self._rng = rng or random.Random()

    # --- Question Bank Delegation ---

    def load_questions(self, questions: Iterable[Question]) -> None:
        with self._lock:
            self._bank.load_questions(questions)

    def get_question_count(self) -> int:
        with self._lock:
            return self._bank.get_question_count()

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._bank.set_shuffle_seed(seed)

    # --- Session Lifecycle ---

    def start_session(
        self,
        user_id: str,
        *,
        subject: str | None = None,
        difficulty: str | None = None,
        count: int | None = None,
        shuffle: bool = False,
        config: SessionConfig | Mapping[str, object] | None = None,
    ) -> str:
        with self._lock:
            questions = self._bank.select(
                subject=subject, difficulty=difficulty, count=count, shuffle=shuffle
            )
            if not questions:
                raise InvalidConfigurationError(
                    "No questions match the requested subject/difficulty."
                )
            state = session_machine.create(questions, config)
            session_id = uuid4().hex
            self._sessions[session_id] = _ActiveSession(user_id=user_id, state=state)
        logger.info(
            "Started session %s for user %s with %d questions.",
            session_id,
            user_id,
            len(questions),
        )
        return session_id

    def get_state(self, session_id: str) -> SessionState:
        with self._lock:
            return self._get(session_id).state

    def get_current_question(self, session_id: str) -> Question | None:
        with self._lock:
            return self._get(session_id).state.current_question

    def submit_answer(self, session_id: str, option_index: int) -> AnswerFeedback:
        with self._lock:
            entry = self._get(session_id)
            question = entry.state.current_question
            entry.state = session_machine.submit_answer(entry.state, option_index)
            # submit_answer rejects terminal sessions, so question was not None.
            return build_feedback(question, entry.state, self._rng)

    def skip_question(self, session_id: str) -> SessionState:
        with self._lock:
            entry = self._get(session_id)
            entry.state = session_machine.skip(entry.state)
            return entry.state

    def tick(self, session_id: str, delta_seconds: float) -> SessionState:
        with self._lock:
            entry = self._get(session_id)
            entry.state = session_machine.advance_clock(entry.state, delta_seconds)
            return entry.state

    def finish_session(self, session_id: str) -> SessionSummary:
        """Summarize a terminated session, forget it and notify summary sinks."""
        with self._lock:
            entry = self._get(session_id)
            summary = summarize(entry.state)
            del self._sessions[session_id]
            sinks = list(self._sinks)

        for sink in sinks:
            try:
                sink(entry.user_id, summary)
            except Exception:
                logger.exception("Summary sink failed for session %s.", session_id)
        return summary

    def discard_session(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def active_session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    # --- Persistence Hooks ---

    def add_summary_sink(self, sink: SummarySink) -> None:
        with self._lock:
            self._sinks.append(sink)

    def _get(self, session_id: str) -> _ActiveSession:
        entry = self._sessions.get(session_id)
        if entry is None:
            raise KeyError(f"Unknown quiz session {session_id!r}")
        return entry
