"""Domain value objects and errors used by the logging facade."""

from __future__ import annotations

from .errors import LevelConfigurationError, LogshimError, MessageEmittedError
from .levels import FALLBACK_LEVEL, Level, resolve_level
from .values import fit_integer, format_message

__all__ = [
    "FALLBACK_LEVEL",
    "Level",
    "LevelConfigurationError",
    "LogshimError",
    "MessageEmittedError",
    "fit_integer",
    "format_message",
    "resolve_level",
]
