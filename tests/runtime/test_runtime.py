from __future__ import annotations

import io

from logshim import get_logger, init_logger, reset_logger
from logshim.adapters.console.rich_console import RichConsoleLogger
from logshim.adapters.structured.structlog_logger import StructLogger
from logshim.domain.levels import Level


def test_init_logger_installs_and_returns_logger(sink: io.StringIO) -> None:
    logger = StructLogger(sink, Level.INFO)

    assert init_logger(logger) is logger
    assert get_logger() is logger


def test_get_logger_defaults_to_structlog_at_warn() -> None:
    logger = get_logger()

    assert logger.name == "StructLog"
    assert isinstance(logger, StructLogger)
    assert logger.level == StructLogger(io.StringIO(), Level.WARN).level
    assert get_logger() is logger


def test_reset_logger_forgets_installed_backend() -> None:
    rich = init_logger(RichConsoleLogger(io.StringIO(), Level.INFO))

    reset_logger()

    assert get_logger() is not rich


def test_default_logger_is_usable_from_library_code(sink, read_records) -> None:
    init_logger(StructLogger(sink, Level.DEBUG))

    get_logger().debug().str("lib", "parser").msg("parsed")

    (record,) = read_records()
    assert record["lib"] == "parser"
