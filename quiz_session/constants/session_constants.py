"""Session defaults shared by the engine, the manager and the runner."""

DEFAULT_MAX_LIVES: int = 3
DEFAULT_TIME_LIMIT_SECONDS: float = 20 * 60
DEFAULT_QUESTION_POINTS: int = 10

# XP multiplier in tenths: 1.0x plus 0.1x per streak step, capped at 2.0x.
XP_BASE_MULTIPLIER_TENTHS: int = 10
XP_STREAK_STEP_TENTHS: int = 1
XP_MAX_MULTIPLIER_TENTHS: int = 20

PERFECT_ANSWER_SECONDS: float = 10

DIFFICULTY_LEVELS: tuple[str, ...] = ("easy", "medium", "hard")
DEFAULT_DIFFICULTY: str = "medium"
DEFAULT_SUBJECT: str = "Genel"
