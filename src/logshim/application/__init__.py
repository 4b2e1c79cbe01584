"""Application layer: ports consumed by host code and implemented by adapters."""

from __future__ import annotations

from .ports import Logger, Message

__all__ = ["Logger", "Message"]
