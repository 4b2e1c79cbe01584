"""Structured (machine-readable) backends."""

from __future__ import annotations

from .structlog_logger import StructLogger, StructMessage, translate_level

__all__ = ["StructLogger", "StructMessage", "translate_level"]
