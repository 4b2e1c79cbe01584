"""Concrete backends implementing the :mod:`logshim.application.ports`."""

from __future__ import annotations

from .console.rich_console import RichConsoleLogger, RichMessage
from .structured.structlog_logger import StructLogger, StructMessage, translate_level

__all__ = [
    "RichConsoleLogger",
    "RichMessage",
    "StructLogger",
    "StructMessage",
    "translate_level",
]
