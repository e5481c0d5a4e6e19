"""Exceptions raised by the quiz session engine."""

from __future__ import annotations


class QuizSessionError(Exception):
    """Base class for contract violations reported by the engine."""


class InvalidConfigurationError(QuizSessionError):
    """Raised when a session cannot be created from the given questions or settings."""


class InvalidAnswerError(QuizSessionError):
    """Raised when the submitted option index is outside the current question's options."""


class SessionTerminatedError(QuizSessionError):
    """Raised when a mutating operation is attempted on a finished session."""


class SessionNotTerminatedError(QuizSessionError):
    """Raised when a summary is requested while the session is still running."""
