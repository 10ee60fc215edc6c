"""Shared test fixtures for all test modules."""

import io
from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from prettylog.adapters.sink import OutputSink
from prettylog.core.handler import PrettyHandler
from prettylog.core.models import Attr, Level, Record
from prettylog.core.options import Options
from tests.helpers import FIXED_TIME


@pytest.fixture
def stream() -> io.BytesIO:
    """Provide an in-memory byte stream to capture output."""
    return io.BytesIO()


@pytest.fixture
def make_handler(stream: io.BytesIO) -> Callable[..., PrettyHandler]:
    """Factory fixture for handlers writing to the shared ``stream``.

    Keyword arguments are passed to Options; colors are off unless asked for.

    Usage:
        def test_something(make_handler, stream):
            handler = make_handler(multiline=True)
    """

    def _make(**options: Any) -> PrettyHandler:
        options.setdefault("colorful", False)
        return PrettyHandler(OutputSink(stream), Options(**options))

    return _make


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory fixture for records stamped with FIXED_TIME."""

    def _make(
        message: str = "Server started",
        *attrs: Attr,
        level: int = Level.INFO,
        time: datetime | None = FIXED_TIME,
        **kwargs: Any,
    ) -> Record:
        return Record(time=time, level=level, message=message, attrs=attrs, **kwargs)

    return _make


@pytest.fixture
def output(stream: io.BytesIO) -> Callable[[], str]:
    """Return a callable that decodes everything written to ``stream``."""

    def _output() -> str:
        return stream.getvalue().decode("utf-8")

    return _output
