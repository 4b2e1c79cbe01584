"""Default logger registry for code that does not carry a logger around.

Purpose
-------
Let libraries call :func:`get_logger` while the host application decides,
once, which backend is mounted via :func:`init_logger`.

System Role
-----------
Optional convenience on top of the facades; constructing and passing a
:class:`~logshim.application.ports.logger.Logger` explicitly works without it.
"""

from __future__ import annotations

import sys

from logshim.adapters.structured.structlog_logger import StructLogger
from logshim.application.ports.logger import Logger
from logshim.domain.levels import FALLBACK_LEVEL

from ._state import _STATE_LOCK, clear_logger, current_logger, set_logger


def init_logger(logger: Logger) -> Logger:
    """Install ``logger`` as the process default and return it.

    Examples
    --------
    >>> import io
    >>> from logshim.domain.levels import Level
    >>> installed = init_logger(StructLogger(io.StringIO(), Level.INFO))
    >>> get_logger() is installed
    True
    >>> reset_logger()
    """

    set_logger(logger)
    return logger


def get_logger() -> Logger:
    """Return the default logger, creating a stderr structlog one on first use."""

    with _STATE_LOCK:
        logger = current_logger()
        if logger is None:
            logger = init_logger(StructLogger(sys.stderr, FALLBACK_LEVEL))
        return logger


def reset_logger() -> None:
    """Forget the installed default logger."""

    clear_logger()


__all__ = ["get_logger", "init_logger", "reset_logger"]
