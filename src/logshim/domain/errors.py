"""Exception types raised or reported by the logging facade."""

from __future__ import annotations

from typing import Any


class LogshimError(Exception):
    """Base class for every error originating in :mod:`logshim`."""


class LevelConfigurationError(LogshimError):
    """A logger was configured with a level outside the abstract scale.

    Never raised by the facades; they log it through themselves and carry on
    at the fallback level.
    """

    def __init__(self, level: Any, fallback: str) -> None:
        self.level = level
        self.fallback = fallback
        super().__init__(f"invalid log level {level}, defaulting to {fallback} level")


class MessageEmittedError(LogshimError, RuntimeError):
    """A message builder was used again after its terminal emit."""

    def __init__(self) -> None:
        super().__init__("log message already emitted; request a new message from the logger")


__all__ = ["LevelConfigurationError", "LogshimError", "MessageEmittedError"]
