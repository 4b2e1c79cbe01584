from __future__ import annotations

import io
import json
from collections.abc import Iterator
from typing import Any, Callable

import pytest
from rich.console import Console

from logshim.runtime import reset_logger


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def read_records(sink: io.StringIO) -> Callable[[], list[dict[str, Any]]]:
    """Return a reader decoding every JSON line written to ``sink`` so far."""

    def _read() -> list[dict[str, Any]]:
        return [json.loads(line) for line in sink.getvalue().splitlines() if line]

    return _read


@pytest.fixture
def record_console() -> Console:
    return Console(file=io.StringIO(), record=True, width=200, color_system=None)


@pytest.fixture(autouse=True)
def _isolated_default_logger() -> Iterator[None]:
    reset_logger()
    yield
    reset_logger()
