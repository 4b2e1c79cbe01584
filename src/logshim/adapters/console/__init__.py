"""Human-facing console backends."""

from __future__ import annotations

from .rich_console import RichConsoleLogger, RichMessage

__all__ = ["RichConsoleLogger", "RichMessage"]
