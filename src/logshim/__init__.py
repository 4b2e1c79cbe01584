"""Public package surface of the logging facade.

Application code depends on :class:`Logger`, :class:`Message` and
:class:`Level`; the host picks a backend (:class:`StructLogger` or
:class:`RichConsoleLogger`) once, optionally installing it with
:func:`init_logger`.
"""

from __future__ import annotations

from .adapters import RichConsoleLogger, StructLogger, translate_level
from .application.ports import Logger, Message
from .domain import FALLBACK_LEVEL, Level, LevelConfigurationError, LogshimError, MessageEmittedError
from .runtime import get_logger, init_logger, reset_logger

__all__ = [
    "FALLBACK_LEVEL",
    "Level",
    "LevelConfigurationError",
    "Logger",
    "LogshimError",
    "Message",
    "MessageEmittedError",
    "RichConsoleLogger",
    "StructLogger",
    "get_logger",
    "init_logger",
    "reset_logger",
    "translate_level",
]
