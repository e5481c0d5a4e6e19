"""Utilities for importing a question bank from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    ID: mat-1          (optional, defaults to q<position>)
    SUBJECT: Matematik (optional)
    DIFFICULTY: easy|medium|hard (optional, defaults to medium)
    POINTS: 10         (optional)
    Q: Question text. Additional lines until the next marker are treated
       as part of the question.
    A: First option text
    B: Second option text
    ...                (two to ten options, letters A-J without gaps)
    CORRECT: A-J
    EXPLANATION: Shown after the question is answered (optional, may
       continue on following lines)

Example:

    SUBJECT: Matematik
    DIFFICULTY: easy
    Q: 2 + 2 kaçtır?
    A: 3
    B: 4
    C: 5
    D: 22
    CORRECT: B
    EXPLANATION: İki ile ikinin toplamı dörttür.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quiz_session.constants.session_constants import (
    DEFAULT_DIFFICULTY,
    DEFAULT_QUESTION_POINTS,
    DEFAULT_SUBJECT,
)
from quiz_session.core.models import Question


class QuizImportError(Exception):
    """Raised when a question bank definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[Question]


_OPTION_LETTERS = "ABCDEFGHIJ"
_MIN_OPTIONS = 2
_SINGLE_LINE_KEYS = ("ID", "SUBJECT", "DIFFICULTY", "POINTS", "CORRECT")


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return ImportedQuiz(source_path=file_path, questions=questions)


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    questions: list[Question] = []
    seen_ids: set[str] = set()
    for position, block in enumerate((b for b in blocks if b), start=1):
        try:
            question = _parse_block(block, position)
        except QuizImportError as exc:
            raise QuizImportError(f"Question {position}: {exc}") from exc
        if question.id in seen_ids:
            raise QuizImportError(f"Question {position}: duplicate id {question.id!r}.")
        seen_ids.add(question.id)
        questions.append(question)
    return questions


def _parse_block(block: str, position: int) -> Question:
    question_lines: list[str] = []
    explanation_lines: list[str] = []
    options: dict[str, str] = {}
    fields: dict[str, str] = {}
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("EXPLANATION:"):
            explanation_lines = [line.split(":", 1)[1].strip()]
            current_section = "EXPLANATION"
            continue

        key = upper.split(":", 1)[0]
        if ":" in line and key in _SINGLE_LINE_KEYS:
            fields[key] = line.split(":", 1)[1].strip()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section in options:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")

    option_list = _ordered_options(options)
    correct_index = _parse_correct(fields.get("CORRECT"), len(option_list))
    explanation = "\n".join(explanation_lines).strip() or None

    try:
        return Question(
            id=fields.get("ID") or f"q{position}",
            subject=fields.get("SUBJECT") or DEFAULT_SUBJECT,
            difficulty=(fields.get("DIFFICULTY") or DEFAULT_DIFFICULTY).lower(),
            question_text=question_text,
            options=tuple(option_list),
            correct_option_index=correct_index,
            points=_parse_points(fields.get("POINTS")),
            explanation=explanation,
        )
    except ValueError as exc:
        raise QuizImportError(str(exc)) from exc


def _ordered_options(options: dict[str, str]) -> list[str]:
    if len(options) < _MIN_OPTIONS:
        raise QuizImportError(f"Each question must define at least {_MIN_OPTIONS} options.")
    expected = _OPTION_LETTERS[: len(options)]
    if set(options) != set(expected):
        raise QuizImportError(f"Options must use consecutive letters starting at A ({expected}).")
    option_list = [options[letter].strip() for letter in expected]
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")
    return option_list


def _parse_correct(raw_value: str | None, option_count: int) -> int:
    if not raw_value:
        raise QuizImportError("CORRECT must name the correct option letter.")
    letter = raw_value.upper()
    valid = _OPTION_LETTERS[:option_count]
    if len(letter) != 1 or letter not in valid:
        raise QuizImportError(f"CORRECT must be one of {', '.join(valid)}.")
    return valid.index(letter)


def _parse_points(raw_value: str | None) -> int:
    if raw_value is None:
        return DEFAULT_QUESTION_POINTS
    try:
        points = int(raw_value)
    except ValueError as exc:  # pragma: no cover - conversion error details unnecessary
        raise QuizImportError("POINTS must be an integer.") from exc
    if points <= 0:
        raise QuizImportError("POINTS must be a positive integer.")
    return points
