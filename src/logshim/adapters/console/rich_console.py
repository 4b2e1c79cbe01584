"""Rich-powered console adapter implementing :class:`Logger`.

Purpose
-------
Render log lines for humans: one coloured line per message, fields appended
as ``key=value`` pairs.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleLogger` - facade filtering on the abstract scale.
* :class:`RichMessage` - per-call builder printing through Rich.

System Role
-----------
Alternative to :class:`~logshim.adapters.structured.structlog_logger.StructLogger`
for interactive terminals. Unlike the structlog backend it keeps NOTICE as a
level of its own.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Mapping, MutableMapping, TextIO

from rich.console import Console

from logshim.application.ports.logger import Logger, Message
from logshim.domain.errors import MessageEmittedError
from logshim.domain.levels import Level, resolve_level
from logshim.domain.values import INT32, INT64, UINT64, fit_integer, format_message

ERROR_KEY = "error"

Clock = Callable[[], datetime]

_STYLE_MAP: Mapping[Level, str] = {
    Level.DEBUG: "dim",
    Level.INFO: "cyan",
    Level.NOTICE: "green",
    Level.WARN: "yellow",
    Level.ERROR: "bold red",
}

#: Default Rich styles keyed by :class:`Level`.


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RichConsoleLogger(Logger):
    """Print messages at or above a minimum :class:`Level` to a Rich console."""

    NAME = "RichConsole"

    def __init__(
        self,
        sink: TextIO | None = None,
        level: Level | int = Level.INFO,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[Level | str, str] | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Configure the console, level threshold and style overrides.

        Parameters
        ----------
        sink:
            Text stream handed to :class:`rich.console.Console`; ignored when
            ``console`` is supplied.
        level:
            Least severe level printed. Unknown values fall back to WARN and
            are reported through this logger.
        styles:
            Per-level Rich style overrides; keys may be level names.
        clock:
            Timestamp source, defaulting to the current UTC time.
        """
        if console is not None:
            self._console = console
        else:
            self._console = Console(file=sink, force_terminal=force_color, no_color=no_color, soft_wrap=True)
        self._no_color = no_color
        self._clock = clock or _utc_now
        self._style_map = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            self._style_map[Level.from_name(key) if isinstance(key, str) else Level(key)] = value

        self._level, error = resolve_level(level)
        if error is not None:
            self.err(error).msg("log configuration error")

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def level(self) -> Level:
        return self._level

    def err(self, err: BaseException | None) -> RichMessage:
        if err is None:
            return self.info()
        return self.error().err(err)

    def error(self) -> RichMessage:
        return self._message(Level.ERROR)

    def warn(self) -> RichMessage:
        return self._message(Level.WARN)

    def notice(self) -> RichMessage:
        return self._message(Level.NOTICE)

    def info(self) -> RichMessage:
        return self._message(Level.INFO)

    def debug(self) -> RichMessage:
        return self._message(Level.DEBUG)

    def _message(self, level: Level) -> RichMessage:
        return RichMessage(self, level, enabled=level <= self._level)

    def _render(self, level: Level, text: str, fields: Mapping[str, Any]) -> None:
        style = "" if self._no_color else self._style_map.get(level, "")
        self._console.print(self._format_line(self._clock(), level, text, fields), style=style, highlight=False, markup=False, emoji=False)

    @staticmethod
    def _format_line(when: datetime, level: Level, text: str, fields: Mapping[str, Any]) -> str:
        """Return the console line for one message.

        Examples
        --------
        >>> when = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
        >>> RichConsoleLogger._format_line(when, Level.NOTICE, 'ready', {'port': 80})
        '2025-09-30T12:00:00+00:00 ✱ NOTICE ready port=80'
        """
        pairs = "".join(f" {key}={value}" for key, value in fields.items())
        return f"{when.isoformat()} {level.icon} {level.name:>6} {text}{pairs}"


class RichMessage(Message):
    """Fields for one console line; printing happens on :meth:`msg`."""

    def __init__(self, logger: RichConsoleLogger, level: Level, *, enabled: bool) -> None:
        self._logger = logger
        self._level = level
        self._enabled = enabled
        self._fields: dict[str, Any] = {}
        self._emitted = False

    def _check_open(self) -> None:
        if self._emitted:
            raise MessageEmittedError()

    def _set(self, key: str, val: Any) -> RichMessage:
        self._check_open()
        self._fields[key] = val
        return self

    def err(self, err: BaseException | None) -> RichMessage:
        if err is None:
            self._check_open()
            return self
        return self._set(ERROR_KEY, str(err))

    def bool(self, key: str, val: bool) -> RichMessage:
        return self._set(key, "true" if val else "false")

    def int(self, key: str, val: int) -> RichMessage:
        return self._set(key, fit_integer(val, INT32))

    def int64(self, key: str, val: int) -> RichMessage:
        return self._set(key, fit_integer(val, INT64))

    def uint64(self, key: str, val: int) -> RichMessage:
        return self._set(key, fit_integer(val, UINT64))

    def str(self, key: str, val: str) -> RichMessage:
        return self._set(key, val)

    def time(self, key: str, val: datetime) -> RichMessage:
        return self._set(key, val.isoformat())

    def msg(self, text: str) -> None:
        self._check_open()
        self._emitted = True
        if self._enabled:
            self._logger._render(self._level, text, self._fields)

    def msgf(self, format: str, *args: Any) -> None:
        self.msg(format_message(format, args))


__all__ = ["RichConsoleLogger", "RichMessage"]
