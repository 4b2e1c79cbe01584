"""Process-wide default logger and access helpers."""

from __future__ import annotations

from threading import RLock

from logshim.application.ports.logger import Logger

_LOGGER: Logger | None = None
_STATE_LOCK = RLock()


def set_logger(logger: Logger) -> None:
    """Install ``logger`` as the active default."""

    with _STATE_LOCK:
        global _LOGGER
        _LOGGER = logger


def clear_logger() -> None:
    """Remove the active default if present."""

    with _STATE_LOCK:
        global _LOGGER
        _LOGGER = None


def current_logger() -> Logger | None:
    """Return the active default, or ``None`` before one is installed."""

    with _STATE_LOCK:
        return _LOGGER


__all__ = ["clear_logger", "current_logger", "set_logger"]
