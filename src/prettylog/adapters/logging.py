"""Python logging handler adapter for prettylog.

This adapter bridges Python's standard library logging module to a
PrettyHandler, so records from ``logging.getLogger(...)`` calls are
rendered as colorized, human-readable text.
"""

import logging
import sys
import traceback
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from prettylog.adapters.sink import new_handler
from prettylog.core.attrs import any_
from prettylog.core.handler import PrettyHandler
from prettylog.core.models import Attr, Record, Source
from prettylog.core.options import Options

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


class PrettyLogHandler(logging.Handler):
    """Logging handler that renders log records through a PrettyHandler.

    Example:
        ```python
        from prettylog import PrettyLogHandler, new_handler

        handler = PrettyLogHandler(new_handler(sys.stderr))
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        handler: PrettyHandler,
        context_provider: Callable[[], Mapping[str, Any]] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the bridge.

        Args:
            handler: PrettyHandler that renders and writes the records. Its
                bound groups and attributes apply to every record.
            context_provider: Optional callable returning attributes merged
                into every record, ahead of the ``extra`` fields.
            level: Standard logging level for this handler.
        """
        super().__init__(level)
        self._handler = handler
        self._context_provider = context_provider

    def to_record(self, record: logging.LogRecord) -> Record:
        """Convert a LogRecord into a prettylog Record.

        Args:
            record: The standard library record.

        Returns:
            Record with extras, context and exception info as attributes.
        """
        attrs: list[Attr] = []

        if self._context_provider is not None:
            for key, value in self._context_provider().items():
                attrs.append(any_(key, value))

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS:
                attrs.append(any_(key, value))

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attrs.append(any_("exc_type", exc_type.__name__))
            if exc_value is not None:
                attrs.append(any_("exc_message", str(exc_value)))
            if exc_tb is not None:
                attrs.append(
                    any_(
                        "exc_traceback",
                        "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
                    )
                )

        return Record(
            time=datetime.fromtimestamp(record.created),
            level=record.levelno,
            message=record.getMessage(),
            source=Source(
                file=record.pathname,
                line=record.lineno,
                function=record.funcName or "",
            ),
            attrs=tuple(attrs),
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Render a log record and write it to the handler's sink.

        Args:
            record: The log record to emit.
        """
        if not self._handler.enabled(record.levelno):
            return
        self._handler.handle(self.to_record(record))


def install(
    logger: logging.Logger | None = None,
    handler: PrettyHandler | None = None,
    context_provider: Callable[[], Mapping[str, Any]] | None = None,
) -> PrettyLogHandler:
    """Attach a PrettyLogHandler to a standard library logger.

    Args:
        logger: Logger to attach to. Defaults to the root logger.
        handler: PrettyHandler to render with. Defaults to one writing to
            stderr with options read from the environment.
        context_provider: Passed through to PrettyLogHandler.

    Returns:
        The attached PrettyLogHandler.
    """
    target = logger if logger is not None else logging.getLogger()
    pretty = handler if handler is not None else new_handler(sys.stderr, Options.from_env())
    bridge = PrettyLogHandler(pretty, context_provider=context_provider)
    target.addHandler(bridge)
    return bridge
