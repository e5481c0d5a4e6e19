"""Logging setup for applications embedding the quiz session engine."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.INFO) -> Logger:
    """Install a root handler and return the ``quiz_session`` logger.

    Engine modules log through ``logging.getLogger(__name__)`` and never add
    handlers, so only entry points such as ``app_main`` should call this.
    Session transitions are logged at DEBUG and terminal outcomes at INFO.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("quiz_session")
