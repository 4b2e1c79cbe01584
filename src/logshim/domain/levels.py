"""Abstract log level shared by every backend.

Purpose
-------
Give application code one backend-independent severity scale and a single
fallback policy for values outside of it.

Contents
--------
* :class:`Level` enum with name parsing and presentation metadata.
* :data:`FALLBACK_LEVEL` - level used when a configured value is unknown.
* :func:`resolve_level` - coerce raw input into :class:`Level` with fallback.

System Role
-----------
Adapters translate :class:`Level` into their own severities; the fallback
decision lives here so every adapter reports misconfiguration identically.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import LevelConfigurationError


class Level(IntEnum):
    """Enumerated abstract levels; larger values are more verbose."""

    ERROR = 0
    WARN = 1
    NOTICE = 2
    INFO = 3
    DEBUG = 4

    @property
    def icon(self) -> str:
        """Return the unicode glyph shown by console backends."""

        return _ICON_TABLE[self]

    @classmethod
    def from_name(cls, name: str) -> "Level":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


FALLBACK_LEVEL = Level.WARN

_ALIASES = {"WARNING": "WARN"}

_ICON_TABLE = {
    Level.ERROR: "✖",
    Level.WARN: "⚠",
    Level.NOTICE: "✱",
    Level.INFO: "ℹ",
    Level.DEBUG: "🐞",
}


def resolve_level(value: Level | int) -> tuple[Level, LevelConfigurationError | None]:
    """Return ``value`` as a :class:`Level`, falling back to WARN when unknown.

    Examples
    --------
    >>> resolve_level(2)
    (<Level.NOTICE: 2>, None)
    >>> level, error = resolve_level(99)
    >>> level, str(error)
    (<Level.WARN: 1>, 'invalid log level 99, defaulting to WARN level')
    """

    try:
        return Level(value), None
    except ValueError:
        return FALLBACK_LEVEL, LevelConfigurationError(value, FALLBACK_LEVEL.name)


__all__ = ["FALLBACK_LEVEL", "Level", "resolve_level"]
