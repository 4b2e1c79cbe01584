"""Logger and message ports every backend adapter implements.

Purpose
-------
Define the stable contract application code logs through, so backends can be
swapped without touching call sites.

Contents
--------
* :class:`Message` - chainable builder for one structured log line.
* :class:`Logger` - facade handing out level-specific :class:`Message` objects.

System Role
-----------
Sits between host code and the adapters in :mod:`logshim.adapters`; nothing in
here knows about structlog or Rich.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Message(Protocol):
    """Accumulate typed fields, then emit exactly once.

    Setters mutate the message and return it for chaining. After :meth:`msg`
    or :meth:`msgf` the message is spent and must not be used again.
    """

    def err(self, err: BaseException | None) -> "Message": ...

    def bool(self, key: str, val: bool) -> "Message": ...

    def int(self, key: str, val: int) -> "Message": ...

    def int64(self, key: str, val: int) -> "Message": ...

    def uint64(self, key: str, val: int) -> "Message": ...

    def str(self, key: str, val: str) -> "Message": ...

    def time(self, key: str, val: datetime) -> "Message": ...

    def msg(self, text: str) -> None:
        """Attach ``text`` and hand the finished record to the backend."""

    def msgf(self, format: str, *args: Any) -> None:
        """Format ``format % args`` and emit it via :meth:`msg`."""


@runtime_checkable
class Logger(Protocol):
    """Hand out a fresh :class:`Message` per log line at a fixed level."""

    @property
    def name(self) -> str:
        """Identifier of the backend implementation in use."""

    def err(self, err: BaseException | None) -> Message:
        """Start an error-level message carrying ``err`` as its cause."""

    def error(self) -> Message: ...

    def warn(self) -> Message: ...

    def notice(self) -> Message: ...

    def info(self) -> Message: ...

    def debug(self) -> Message: ...


__all__ = ["Logger", "Message"]
