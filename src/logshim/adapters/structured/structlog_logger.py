"""structlog adapter implementing :class:`Logger` and :class:`Message`.

Purpose
-------
Back the facade with structlog, writing one JSON object per line to any text
sink while filtering by level and stamping every record with a UTC time.

Contents
--------
* :data:`_LEVEL_MAP` - abstract level to stdlib/structlog numeric level.
* :func:`translate_level` - mapping with the WARN fallback.
* :class:`StructLogger` - the facade.
* :class:`StructMessage` - per-call builder wrapping one pending event.

System Role
-----------
Default backend returned by :func:`logshim.get_logger`. NOTICE has no
structlog counterpart and is folded into INFO.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger

from logshim.application.ports.logger import Logger, Message
from logshim.domain.errors import LevelConfigurationError, MessageEmittedError
from logshim.domain.levels import Level, resolve_level
from logshim.domain.values import INT32, INT64, UINT64, fit_integer, format_message

ERROR_KEY = "error"
TIMESTAMP_KEY = "time"
MESSAGE_KEY = "message"

_LEVEL_MAP: Mapping[Level, int] = {
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.NOTICE: logging.INFO,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
}

_METHOD_NAMES: Mapping[int, str] = {
    logging.ERROR: "error",
    logging.WARNING: "warning",
    logging.INFO: "info",
    logging.DEBUG: "debug",
}


def translate_level(level: Level | int) -> tuple[int, LevelConfigurationError | None]:
    """Return the structlog level for ``level`` and any configuration error.

    Examples
    --------
    >>> translate_level(Level.NOTICE)
    (20, None)
    >>> lvl, err = translate_level(-1)
    >>> lvl, str(err)
    (30, 'invalid log level -1, defaulting to WARN level')
    """

    resolved, error = resolve_level(level)
    return _LEVEL_MAP[resolved], error


def stringify_errors(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Render exception field values as their message text."""
    for key, value in event_dict.items():
        if isinstance(value, BaseException):
            event_dict[key] = str(value)
    return event_dict


class StructLogger(Logger):
    """Facade over a structlog logger bound to one sink."""

    NAME = "StructLog"

    def __init__(self, sink: TextIO, level: Level | int) -> None:
        """Build the backend logger; an unknown ``level`` is logged, not raised."""
        backend_level, error = translate_level(level)
        self._level = backend_level
        self._logger = structlog.wrap_logger(
            structlog.WriteLogger(sink),
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True, key=TIMESTAMP_KEY),
                stringify_errors,
                structlog.processors.EventRenamer(MESSAGE_KEY),
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(backend_level),
            context_class=dict,
        )

        if error is not None:
            self.err(error).msg("log configuration error")

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def level(self) -> int:
        """Minimum structlog level that reaches the sink."""
        return self._level

    def err(self, err: BaseException | None) -> StructMessage:
        if err is None:
            return self.info()
        return self.error().err(err)

    def error(self) -> StructMessage:
        return self._message(logging.ERROR)

    def warn(self) -> StructMessage:
        return self._message(logging.WARNING)

    def notice(self) -> StructMessage:
        return self._message(logging.INFO)

    def info(self) -> StructMessage:
        return self._message(logging.INFO)

    def debug(self) -> StructMessage:
        return self._message(logging.DEBUG)

    def _message(self, level: int) -> StructMessage:
        return StructMessage(self._logger, _METHOD_NAMES[level])


class StructMessage(Message):
    """One pending structlog event; emits at most once."""

    def __init__(self, logger: Any, method: str) -> None:
        self._logger = logger
        self._method = method
        self._fields: dict[str, Any] = {}
        self._emitted = False

    def _check_open(self) -> None:
        if self._emitted:
            raise MessageEmittedError()

    def _set(self, key: str, val: Any) -> StructMessage:
        self._check_open()
        self._fields[key] = val
        return self

    def err(self, err: BaseException | None) -> StructMessage:
        if err is None:
            self._check_open()
            return self
        return self._set(ERROR_KEY, err)

    def bool(self, key: str, val: bool) -> StructMessage:
        return self._set(key, bool(val))

    def int(self, key: str, val: int) -> StructMessage:
        return self._set(key, fit_integer(val, INT32))

    def int64(self, key: str, val: int) -> StructMessage:
        return self._set(key, fit_integer(val, INT64))

    def uint64(self, key: str, val: int) -> StructMessage:
        return self._set(key, fit_integer(val, UINT64))

    def str(self, key: str, val: str) -> StructMessage:
        return self._set(key, val)

    def time(self, key: str, val: datetime) -> StructMessage:
        return self._set(key, val.isoformat())

    def msg(self, text: str) -> None:
        self._check_open()
        self._emitted = True
        # a caller field named "event" is overwritten by the message text
        bound = self._logger.bind(**self._fields)
        getattr(bound, self._method)(text)

    def msgf(self, format: str, *args: Any) -> None:
        self.msg(format_message(format, args))


__all__ = ["StructLogger", "StructMessage", "stringify_errors", "translate_level"]
