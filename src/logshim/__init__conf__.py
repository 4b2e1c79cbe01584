"""Static package metadata surfaced by the CLI."""

from __future__ import annotations

name = "logshim"
title = "Structured logging facade with pluggable structlog and Rich backends"
version = "1.0.0"
shell_command = "logshim"


def summary_info() -> str:
    """Return the metadata banner printed by ``logshim info``.

    Examples
    --------
    >>> summary_info().splitlines()[0]
    'Info for logshim:'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    return "\n".join(lines) + "\n"


__all__ = ["summary_info"]
