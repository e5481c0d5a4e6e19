"""Validated per-session settings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from quiz_session.constants.session_constants import (
    DEFAULT_MAX_LIVES,
    DEFAULT_TIME_LIMIT_SECONDS,
)
from quiz_session.core.errors import InvalidConfigurationError


class SessionConfig(BaseModel):
    """Settings accepted when a session is created.

    Keys may be given in snake_case or in the camelCase used by the web
    client (``maxLives``, ``timeLimitSeconds``). An explicit ``None`` time
    limit disables the clock-based termination entirely.

    Building the model directly raises pydantic's ``ValidationError`` on bad
    values; pass a plain mapping to ``create`` to get
    ``InvalidConfigurationError`` instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    max_lives: int = Field(default=DEFAULT_MAX_LIVES, alias="maxLives", ge=1, strict=True)
    time_limit_seconds: Annotated[float, Field(ge=0, allow_inf_nan=False)] | None = Field(
        default=DEFAULT_TIME_LIMIT_SECONDS, alias="timeLimitSeconds"
    )


def resolve_config(config: SessionConfig | Mapping[str, object] | None) -> SessionConfig:
    """Turn caller-supplied settings into a SessionConfig or raise InvalidConfigurationError."""
    if isinstance(config, SessionConfig):
        return config
    try:
        return SessionConfig.model_validate(dict(config or {}))
    except ValidationError as exc:
        raise InvalidConfigurationError(f"Invalid session configuration: {exc}") from exc
