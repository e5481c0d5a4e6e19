"""Tests for the session manager facade."""

import logging
import random

import pytest

from quiz_session.core.errors import (
    InvalidConfigurationError,
    SessionNotTerminatedError,
    SessionTerminatedError,
)
from quiz_session.core.models import SessionStatus
from quiz_session.core.services.question_bank import QuestionBank
from quiz_session.core.session_manager import QuizSessionManager


@pytest.fixture
def manager(mixed_questions):
    return QuizSessionManager(QuestionBank(mixed_questions), rng=random.Random(3))


def test_full_session_lifecycle(manager):
    received = []
    manager.add_summary_sink(lambda user_id, summary: received.append((user_id, summary)))

    session_id = manager.start_session("user-1", subject="Türkçe")
    assert manager.active_session_count() == 1
    assert manager.get_current_question(session_id).id == "q2"

    feedback = manager.submit_answer(session_id, 1)
    assert feedback.is_correct is True
    assert feedback.state.current_index == 1
    assert manager.get_current_question(session_id).id == "q5"

    state = manager.skip_question(session_id)
    assert state.status is SessionStatus.COMPLETED

    summary = manager.finish_session(session_id)
    assert summary.score == 10
    assert received == [("user-1", summary)]
    assert manager.active_session_count() == 0
    with pytest.raises(KeyError):
        manager.get_state(session_id)


def test_sessions_are_independent(manager):
    first = manager.start_session("a", count=2)
    second = manager.start_session("b", count=2, config={"max_lives": 1})
    manager.submit_answer(second, 3)
    assert manager.get_state(second).status is SessionStatus.FAILED_OUT_OF_LIVES
    assert manager.get_state(first).status is SessionStatus.IN_PROGRESS
    assert manager.get_state(first).lives == 3


def test_tick_times_out_session(manager):
    session_id = manager.start_session("u", config={"timeLimitSeconds": 30})
    manager.tick(session_id, 10)
    state = manager.tick(session_id, 20)
    assert state.status is SessionStatus.TIMED_OUT
    with pytest.raises(SessionTerminatedError):
        manager.submit_answer(session_id, 0)
    with pytest.raises(SessionTerminatedError):
        manager.tick(session_id, 1)


def test_finish_requires_terminal_session(manager):
    session_id = manager.start_session("u")
    with pytest.raises(SessionNotTerminatedError):
        manager.finish_session(session_id)
    assert manager.active_session_count() == 1
    manager.discard_session(session_id)
    assert manager.active_session_count() == 0


def test_empty_selection_is_rejected(manager):
    with pytest.raises(InvalidConfigurationError):
        manager.start_session("u", subject="Coğrafya")


def test_unknown_session_id(manager):
    with pytest.raises(KeyError):
        manager.submit_answer("missing", 0)


def test_failing_sink_does_not_reach_caller(manager, caplog):
    def broken_sink(user_id, summary):
        raise RuntimeError("storage offline")

    delivered = []
    manager.add_summary_sink(broken_sink)
    manager.add_summary_sink(lambda user_id, summary: delivered.append(user_id))

    session_id = manager.start_session("u", count=1)
    manager.submit_answer(session_id, 0)
    with caplog.at_level(logging.ERROR):
        summary = manager.finish_session(session_id)

    assert summary.status is SessionStatus.COMPLETED
    assert delivered == ["u"]
    assert "Summary sink failed" in caplog.text


def test_load_questions_replaces_bank(manager, question_factory):
    manager.load_questions(question_factory(2, subject="Fizik"))
    assert manager.get_question_count() == 2
    session_id = manager.start_session("u", subject="Fizik")
    assert manager.get_state(session_id).total_questions == 2


def test_seeded_shuffle(mixed_questions):
    orders = []
    for _ in range(2):
        manager = QuizSessionManager(QuestionBank(mixed_questions))
        manager.set_shuffle_seed(11)
        session_id = manager.start_session("u", shuffle=True)
        orders.append([q.id for q in manager.get_state(session_id).questions])
    assert orders[0] == orders[1]
