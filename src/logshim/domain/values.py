"""Value coercion shared by the message builders.

Both helpers always return something printable; a log line is never lost to a
caller passing the wrong arguments.
"""

from __future__ import annotations

from typing import Any

INT32 = (-(2**31), 2**31 - 1)
INT64 = (-(2**63), 2**63 - 1)
UINT64 = (0, 2**64 - 1)


def format_message(format: str, args: tuple[Any, ...]) -> str:
    """Return ``format % args``, or the format followed by the raw args when they do not fit.

    Examples
    --------
    >>> format_message("count=%d", (7,))
    'count=7'
    >>> format_message("100%", ())
    '100%'
    >>> format_message("count=%d", ("seven",))
    "count=%d ('seven',)"
    """

    if not args:
        return format
    try:
        return format % args
    except (TypeError, ValueError):
        return f"{format} {args!r}"


def fit_integer(val: Any, bounds: tuple[int, int]) -> int | str:
    """Return ``val`` as an int when inside ``bounds``, else its text.

    Examples
    --------
    >>> fit_integer(42, INT32)
    42
    >>> fit_integer(-1, UINT64)
    '-1'
    """

    try:
        number = int(val)
    except (TypeError, ValueError):
        return str(val)
    low, high = bounds
    if low <= number <= high:
        return number
    return str(number)


__all__ = ["INT32", "INT64", "UINT64", "fit_integer", "format_message"]
