"""Shared fixtures for quiz session tests."""

from __future__ import annotations

import pytest

from quiz_session.core.models import Question


def make_question(
    index: int,
    points: int = 10,
    subject: str = "Matematik",
    difficulty: str = "easy",
    correct: int = 0,
) -> Question:
    return Question(
        id=f"q{index}",
        subject=subject,
        difficulty=difficulty,
        question_text=f"Soru {index}",
        options=("A", "B", "C", "D"),
        correct_option_index=correct,
        points=points,
        explanation=f"Açıklama {index}",
    )


@pytest.fixture
def question_factory():
    def factory(count: int, **kwargs) -> list[Question]:
        return [make_question(i, **kwargs) for i in range(1, count + 1)]

    return factory


@pytest.fixture
def mixed_questions() -> list[Question]:
    return [
        make_question(1, subject="Matematik", difficulty="easy"),
        make_question(2, subject="Türkçe", difficulty="medium", correct=1),
        make_question(3, subject="Matematik", difficulty="hard", correct=2, points=20),
        make_question(4, subject="Tarih", difficulty="medium", correct=3),
        make_question(5, subject="Türkçe", difficulty="easy"),
    ]
