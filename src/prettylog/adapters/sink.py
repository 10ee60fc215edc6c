"""Output sink adapter: serialized writes to a shared stream."""

import io
import threading
from typing import IO, Any

from prettylog.core.colors import DEFAULT_THEME, ColorTheme
from prettylog.core.handler import PrettyHandler
from prettylog.core.options import Options


class OutputSink:
    """Implementation of SinkPort over a byte or text stream.

    Each ``write`` holds a lock for the duration of one entry, so entries
    from concurrent callers never interleave.

    Args:
        stream: Destination stream, binary or text.
        text: Force text (True) or binary (False) writes. By default the
            stream is treated as text if it is an ``io.TextIOBase``.
    """

    def __init__(self, stream: IO[Any], text: bool | None = None) -> None:
        self._stream = stream
        self._text = isinstance(stream, io.TextIOBase) if text is None else text
        self._lock = threading.Lock()

    def write(self, data: bytes) -> None:
        """Write one rendered entry and flush it.

        Args:
            data: UTF-8 encoded entry.

        Raises:
            OSError: If the stream accepts only part of the entry.
            Exception: Whatever the stream raises, unchanged.
        """
        payload = data.decode("utf-8") if self._text else data
        flush = getattr(self._stream, "flush", None)
        with self._lock:
            written = self._stream.write(payload)
            # Raw streams report short writes through the return value
            if isinstance(written, int) and written < len(payload):
                raise OSError(
                    f"short write: {written} of {len(payload)} written"
                )
            if flush is not None:
                flush()


def new_handler(
    stream: IO[Any],
    options: Options | None = None,
    theme: ColorTheme = DEFAULT_THEME,
) -> PrettyHandler:
    """Create a PrettyHandler writing to ``stream`` through an OutputSink.

    Args:
        stream: Destination stream, binary or text.
        options: Rendering options. Defaults to ``Options()``.
        theme: Colors used when ``options.colorful`` is on.

    Returns:
        A handler with an empty chain.
    """
    return PrettyHandler(OutputSink(stream), options, theme)
