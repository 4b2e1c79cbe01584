"""Protocols describing the facade boundary."""

from __future__ import annotations

from .logger import Logger, Message

__all__ = ["Logger", "Message"]
