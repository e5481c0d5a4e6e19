"""In-memory question bank that supplies ordered question lists to sessions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import random

from quiz_session.constants.session_constants import (
    DEFAULT_DIFFICULTY,
    DEFAULT_QUESTION_POINTS,
    DEFAULT_SUBJECT,
)
from quiz_session.core.models import Question


class QuestionBank:
    """Stores validated questions and selects them for new sessions."""

    def __init__(self, questions: Iterable[Question] = ()) -> None:
        self._questions: list[Question] = []
        self._shuffle_rng = random.Random()
        for question in questions:
            self.add_question(question)

    def load_questions(self, questions: Iterable[Question]) -> None:
        """Replace the current bank with a new list of questions."""
        prepared: list[Question] = []
        seen: set[str] = set()
        for question in questions:
            self._check_unique(question, seen)
            seen.add(question.id)
            prepared.append(question)
        if not prepared:
            raise ValueError("Question bank must contain at least one question.")
        self._questions = prepared

    def add_question(self, question: Question) -> None:
        self._check_unique(question, {q.id for q in self._questions})
        self._questions.append(question)

    def get_questions(self) -> list[Question]:
        """Return a copy of all stored questions."""
        return list(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_question(self, question_id: str) -> Question:
        for question in self._questions:
            if question.id == question_id:
                return question
        raise KeyError(f"Unknown question id {question_id!r}")

    def subjects(self) -> list[str]:
        """Distinct subjects in first-seen order."""
        return list(dict.fromkeys(question.subject for question in self._questions))

    def clear(self) -> None:
        self._questions = []

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    def select(
        self,
        subject: str | None = None,
        difficulty: str | None = None,
        count: int | None = None,
        shuffle: bool = False,
    ) -> list[Question]:
        """Filter, optionally shuffle, then truncate to ``count`` questions."""
        if count is not None and count < 0:
            raise ValueError("Question count must not be negative.")
        pool = [
            question
            for question in self._questions
            if (subject is None or question.subject == subject)
            and (difficulty is None or question.difficulty == difficulty)
        ]
        if shuffle:
            self._shuffle_rng.shuffle(pool)
        if count is not None:
            pool = pool[:count]
        return pool

    @staticmethod
    def _check_unique(question: Question, existing_ids: set[str]) -> None:
        if question.id in existing_ids:
            raise ValueError(f"Duplicate question id {question.id!r}.")


def question_from_record(record: Mapping[str, object]) -> Question:
    """Build a Question from a question-bank record as stored by the web product.

    Options may be plain strings or ``{"text": ..., "letter": ...}`` objects;
    both are reduced to their text in the stored order.
    """
    try:
        raw_options = record["options"]
        correct = record["correctAnswer"]
        text = record["questionText"]
    except KeyError as exc:
        raise ValueError(f"Question record is missing field {exc.args[0]!r}.") from exc
    if not isinstance(raw_options, (list, tuple)):
        raise ValueError("Question record options must be a list.")

    explanation = record.get("explanation")
    points = record.get("points")
    return Question(
        id=str(record.get("id", "")),
        subject=str(record.get("subject") or DEFAULT_SUBJECT),
        difficulty=str(record.get("difficulty") or DEFAULT_DIFFICULTY).lower(),
        question_text=str(text).strip(),
        options=normalize_options(raw_options),
        correct_option_index=int(correct),
        points=DEFAULT_QUESTION_POINTS if points is None else int(points),
        explanation=str(explanation) if explanation else None,
    )


def normalize_options(raw_options: Iterable[object]) -> tuple[str, ...]:
    normalized: list[str] = []
    for option in raw_options:
        if isinstance(option, Mapping):
            if "text" not in option:
                raise ValueError("Option objects must carry a 'text' field.")
            normalized.append(str(option["text"]).strip())
        else:
            normalized.append(str(option).strip())
    return tuple(normalized)
