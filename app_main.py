"""Terminal entry point: play an imported question bank as a timed quiz."""

from __future__ import annotations

import logging
from pathlib import Path
import sys
import time

from quiz_session.constants.about import APP_NAME, APP_VERSION
from quiz_session.core.errors import InvalidAnswerError
from quiz_session.core.models import SessionSummary
from quiz_session.core.progress_payload import build_session_record
from quiz_session.core.quiz_importer import QuizImportError, load_quiz_from_file
from quiz_session.core.session_manager import QuizSessionManager
from quiz_session.utils.logging_config import configure_logging

_OPTION_LETTERS = "ABCDEFGHIJ"
_USER_ID = "terminal"

logger = logging.getLogger("quiz_session.app")


def _log_summary(user_id: str, summary: SessionSummary) -> None:
    record = build_session_record(summary, user_id)
    logger.info("Session record: %s", record.model_dump_json(by_alias=True))


def _prompt(question_text: str, options: tuple[str, ...]) -> str:
    print()
    print(question_text)
    for idx, option in enumerate(options):
        print(f"  {_OPTION_LETTERS[idx]}) {option}")
    return input("Answer (letter, empty to skip): ").strip().upper()


def main(argv: list[str] | None = None) -> int:
    """Load the quiz file named on the command line and run one session."""
    args = sys.argv[1:] if argv is None else argv
    configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)
    if len(args) != 1:
        print("usage: app_main.py QUIZ_FILE", file=sys.stderr)
        return 2

    try:
        imported = load_quiz_from_file(Path(args[0]))
    except (OSError, QuizImportError) as exc:
        logger.error("Could not load quiz: %s", exc)
        return 1

    manager = QuizSessionManager()
    manager.load_questions(imported.questions)
    manager.add_summary_sink(_log_summary)
    session_id = manager.start_session(_USER_ID)

    last_tick = time.monotonic()
    state = manager.get_state(session_id)
    while not state.is_terminal:
        question = state.current_question
        answer = _prompt(question.question_text, question.options)

        now = time.monotonic()
        state = manager.tick(session_id, now - last_tick)
        last_tick = now
        if state.is_terminal:
            print("Süre doldu!")
            break

        if not answer:
            state = manager.skip_question(session_id)
            continue
        option_index = _OPTION_LETTERS.find(answer) if len(answer) == 1 else -1
        try:
            feedback = manager.submit_answer(session_id, option_index)
        except InvalidAnswerError:
            print("Geçersiz seçenek, tekrar deneyin.")
            continue
        state = feedback.state
        print(f"{feedback.message} (+{feedback.xp_gained} XP, seri {feedback.streak_count}, can {state.lives})")
        if feedback.explanation:
            print(feedback.explanation)

    summary = manager.finish_session(session_id)
    print()
    print(f"Durum: {summary.status.value}")
    print(f"Puan: {summary.score}  XP: {summary.xp_gained}")
    print(f"Doğruluk: %{round(summary.accuracy * 100)} ({summary.correct}/{summary.answered})")
    print(f"Süre: {int(summary.elapsed_seconds)} sn")
    return 0


if __name__ == "__main__":
    sys.exit(main())
