from __future__ import annotations

import io
from datetime import datetime
from typing import Any

import pytest

from logshim.adapters.console.rich_console import RichConsoleLogger
from logshim.adapters.structured.structlog_logger import StructLogger
from logshim.application.ports.logger import Logger, Message
from logshim.domain.levels import Level


class _RecordingMessage(Message):
    def __init__(self, sent: list[tuple[str, dict[str, Any]]]) -> None:
        self._sent = sent
        self.fields: dict[str, Any] = {}

    def err(self, err: BaseException | None) -> "_RecordingMessage":
        if err is not None:
            self.fields["error"] = err
        return self

    def bool(self, key: str, val: bool) -> "_RecordingMessage":
        self.fields[key] = val
        return self

    def int(self, key: str, val: int) -> "_RecordingMessage":
        self.fields[key] = val
        return self

    def int64(self, key: str, val: int) -> "_RecordingMessage":
        self.fields[key] = val
        return self

    def uint64(self, key: str, val: int) -> "_RecordingMessage":
        self.fields[key] = val
        return self

    def str(self, key: str, val: str) -> "_RecordingMessage":
        self.fields[key] = val
        return self

    def time(self, key: str, val: datetime) -> "_RecordingMessage":
        self.fields[key] = val
        return self

    def msg(self, text: str) -> None:
        self._sent.append((text, self.fields))

    def msgf(self, format: str, *args: Any) -> None:
        self.msg(format % args)


class _RecordingLogger(Logger):
    def __init__(self) -> None:
        self.sent: list[tuple[str, dict[str, Any]]] = []

    @property
    def name(self) -> str:
        return "Recording"

    def err(self, err: BaseException | None) -> _RecordingMessage:
        return self.error().err(err)

    def error(self) -> _RecordingMessage:
        return _RecordingMessage(self.sent)

    def warn(self) -> _RecordingMessage:
        return _RecordingMessage(self.sent)

    def notice(self) -> _RecordingMessage:
        return _RecordingMessage(self.sent)

    def info(self) -> _RecordingMessage:
        return _RecordingMessage(self.sent)

    def debug(self) -> _RecordingMessage:
        return _RecordingMessage(self.sent)


def _log_startup(logger: Logger) -> None:
    logger.info().str("component", "api").int("workers", 4).msg("started")


def test_call_sites_only_depend_on_the_port() -> None:
    logger = _RecordingLogger()

    _log_startup(logger)

    assert logger.sent == [("started", {"component": "api", "workers": 4})]


@pytest.mark.parametrize(
    "factory",
    [
        lambda: StructLogger(io.StringIO(), Level.INFO),
        lambda: RichConsoleLogger(io.StringIO(), Level.INFO),
        _RecordingLogger,
    ],
)
def test_backends_satisfy_logger_protocol(factory) -> None:
    logger = factory()

    assert isinstance(logger, Logger)
    for method in (logger.error, logger.warn, logger.notice, logger.info, logger.debug):
        assert isinstance(method(), Message)
    assert isinstance(logger.err(RuntimeError("boom")), Message)


@pytest.mark.parametrize("factory", [StructLogger, RichConsoleLogger])
def test_message_builders_share_the_same_plain_layout(factory) -> None:
    message = factory(io.StringIO(), Level.INFO).info()

    assert "__slots__" not in type(message).__dict__
    assert {"_fields", "_emitted"} <= set(vars(message))
