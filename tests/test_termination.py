"""Tests for termination rules and session summaries."""

import pytest

from quiz_session.core.errors import SessionNotTerminatedError
from quiz_session.core.models import SessionStatus
from quiz_session.core.services.session_machine import advance_clock, create, skip, submit_answer
from quiz_session.core.services.termination import (
    check_termination,
    progress_percentage,
    summarize,
)


def test_all_correct_completes_with_full_score(question_factory):
    state = create(question_factory(3, points=10), {"max_lives": 3})
    for _ in range(3):
        state = submit_answer(state, 0)

    assert state.status is SessionStatus.COMPLETED
    assert state.score == 30
    assert len(state.answer_log) == 3
    assert state.streak == 3
    summary = summarize(state)
    assert summary.accuracy == 1.0
    assert summary.score == state.score == 30


def test_three_wrong_answers_fail_before_the_end(question_factory):
    state = create(question_factory(5), {"max_lives": 3})
    for expected_lives in (2, 1):
        state = submit_answer(state, 1)
        assert state.lives == expected_lives
        assert state.status is SessionStatus.IN_PROGRESS
    state = submit_answer(state, 1)

    assert state.lives == 0
    assert state.current_index == 3
    assert state.status is SessionStatus.FAILED_OUT_OF_LIVES
    summary = summarize(state)
    assert summary.answered == 3
    assert summary.total_questions == 5
    assert summary.lives_remaining == 0


def test_time_out_before_any_answer(question_factory):
    state = create(question_factory(2), {"time_limit_seconds": 60, "max_lives": 3})
    state = advance_clock(state, 61)

    assert state.status is SessionStatus.TIMED_OUT
    assert state.answer_log == ()
    summary = summarize(state)
    assert summary.accuracy == 0
    assert summary.answered == 0
    assert summary.elapsed_seconds == 61
    assert summary.best_streak == 0
    assert summary.average_seconds_per_question == 61


def test_mixed_answers_and_skip(question_factory):
    state = create(question_factory(4, points=10))
    state = submit_answer(state, 0)
    state = skip(state)
    state = submit_answer(state, 2)
    assert state.lives == 2
    state = submit_answer(state, 0)

    assert state.status is SessionStatus.COMPLETED
    assert state.score == 20
    assert state.streak == 1
    summary = summarize(state)
    assert summary.answered == 3
    assert summary.correct == 2
    assert summary.skipped == 1
    assert summary.accuracy == pytest.approx(2 / 3)
    assert summary.score == state.score
    assert summary.lives_remaining == 2
    assert summary.best_streak == 1


def test_summarize_requires_terminal_state(question_factory):
    state = create(question_factory(2))
    with pytest.raises(SessionNotTerminatedError):
        summarize(state)


def test_summarize_is_idempotent(question_factory):
    state = create(question_factory(2))
    state = submit_answer(state, 0)
    state = submit_answer(state, 3)
    assert summarize(state) == summarize(state)


def test_check_termination_is_idempotent(question_factory):
    running = create(question_factory(2))
    assert check_termination(running) is running

    finished = submit_answer(submit_answer(running, 0), 0)
    assert check_termination(finished) is finished


def test_perfect_answers_count_fast_correct_answers(question_factory):
    state = create(question_factory(3))
    state = advance_clock(state, 3)
    state = submit_answer(state, 0)
    state = advance_clock(state, 12)
    state = submit_answer(state, 0)
    state = advance_clock(state, 1)
    state = submit_answer(state, 1)
    summary = summarize(state)
    assert summary.perfect_answers == 1
    assert summary.average_seconds_per_question == pytest.approx(16 / 3)


def test_accuracy_by_subject(mixed_questions):
    state = create(mixed_questions)
    state = submit_answer(state, 0)  # Matematik, correct
    state = submit_answer(state, 0)  # Türkçe, wrong
    state = submit_answer(state, 2)  # Matematik, correct
    state = skip(state)  # Tarih, skipped
    state = submit_answer(state, 0)  # Türkçe, correct
    by_subject = summarize(state).accuracy_by_subject()
    assert by_subject == {
        "Matematik": 1.0,
        "Türkçe": pytest.approx(0.5),
        "Tarih": 0.0,
    }


def test_progress_percentage(question_factory):
    state = create(question_factory(4))
    assert progress_percentage(state) == 0
    state = skip(state)
    assert progress_percentage(state) == 25
    state = submit_answer(submit_answer(submit_answer(state, 0), 0), 0)
    assert progress_percentage(state) == 100
