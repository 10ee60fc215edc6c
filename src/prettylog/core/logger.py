"""Logger front end that builds records and passes them to a handler."""

import sys
from datetime import datetime
from typing import Any

from prettylog.core.attrs import args_to_attrs, attrs_from_kwargs
from prettylog.core.models import Level, Record, Source
from prettylog.core.ports import HandlerPort


class Logger:
    """Builds records from log calls and hands them to a handler.

    Positional arguments after the message follow the key/value convention
    of ``args_to_attrs``; keyword arguments become attributes in order.

    Example:
        ```python
        logger = Logger(new_handler(sys.stderr))
        logger.info("Server started", port=8080)
        db_logger = logger.with_group("db").with_(host="localhost")
        ```
    """

    def __init__(self, handler: HandlerPort) -> None:
        self._handler = handler

    @property
    def handler(self) -> HandlerPort:
        return self._handler

    def enabled(self, level: int) -> bool:
        """Report whether records at ``level`` would be emitted."""
        return self._handler.enabled(level)

    def with_(self, *args: Any, **attributes: Any) -> "Logger":
        """Return a logger whose records all carry these attributes."""
        attrs = args_to_attrs(args) + attrs_from_kwargs(**attributes)
        handler = self._handler.with_attrs(attrs)
        if handler is self._handler:
            return self
        return Logger(handler)

    def with_group(self, name: str) -> "Logger":
        """Return a logger that nests later attributes under ``name``."""
        handler = self._handler.with_group(name)
        if handler is self._handler:
            return self
        return Logger(handler)

    def log(self, level: int, message: str, *args: Any, **attributes: Any) -> None:
        """Log a message at an arbitrary level.

        Args:
            level: Level number.
            message: The log message.
            *args: Attr objects or alternating keys and values.
            **attributes: Additional structured fields.
        """
        self._log(level, message, args, attributes)

    def debug(self, message: str, *args: Any, **attributes: Any) -> None:
        """Log a DEBUG message."""
        self._log(Level.DEBUG, message, args, attributes)

    def info(self, message: str, *args: Any, **attributes: Any) -> None:
        """Log an INFO message."""
        self._log(Level.INFO, message, args, attributes)

    def warn(self, message: str, *args: Any, **attributes: Any) -> None:
        """Log a WARN message."""
        self._log(Level.WARN, message, args, attributes)

    def error(self, message: str, *args: Any, **attributes: Any) -> None:
        """Log an ERROR message."""
        self._log(Level.ERROR, message, args, attributes)

    def _log(
        self,
        level: int,
        message: str,
        args: tuple[Any, ...],
        attributes: dict[str, Any],
    ) -> None:
        if not self._handler.enabled(level):
            return
        # Two frames up: the public method, then its caller
        frame = sys._getframe(2)
        record = Record(
            time=datetime.now(),
            level=level,
            message=message,
            source=Source(
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
                function=frame.f_code.co_name,
            ),
            attrs=args_to_attrs(args) + attrs_from_kwargs(**attributes),
        )
        self._handler.handle(record)
