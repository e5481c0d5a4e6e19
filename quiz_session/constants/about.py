"""Static metadata describing the quiz session engine."""

APP_NAME = "QuizSession"
APP_VERSION = "0.1"
