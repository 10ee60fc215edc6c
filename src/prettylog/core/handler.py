"""PrettyHandler: level gate, renderer and sink behind one handler object."""

import copy
from collections.abc import Iterable

from prettylog.core.chain import ContextChain
from prettylog.core.colors import DEFAULT_THEME, ColorTheme
from prettylog.core.models import Attr, Record
from prettylog.core.options import Options
from prettylog.core.ports import SinkPort
from prettylog.core.rendering import Renderer


class PrettyHandler:
    """Handler that renders records as colorized, human-readable text.

    Derived handlers made by ``with_attrs`` and ``with_group`` share the
    sink, options and theme of their parent and carry their own chain.

    Example:
        ```python
        from prettylog import Options, OutputSink, PrettyHandler, string

        handler = PrettyHandler(OutputSink(sys.stderr), Options(multiline=True))
        request_handler = handler.with_group("request").with_attrs(
            [string("id", "abc123")]
        )
        ```
    """

    def __init__(
        self,
        sink: SinkPort,
        options: Options | None = None,
        theme: ColorTheme = DEFAULT_THEME,
    ) -> None:
        """Initialize the handler.

        Args:
            sink: Destination for rendered entries.
            options: Rendering options. Defaults to ``Options()``.
            theme: Colors used when ``options.colorful`` is on.
        """
        self._sink = sink
        self._options = options or Options()
        self._theme = theme
        self._renderer = Renderer(self._options, theme)
        self._chain = ContextChain()

    @property
    def options(self) -> Options:
        return self._options

    @property
    def chain(self) -> ContextChain:
        return self._chain

    def enabled(self, level: int) -> bool:
        """Return True if records at ``level`` pass the threshold."""
        return level >= self._options.level

    def handle(self, record: Record) -> None:
        """Render a record and write it to the sink.

        Records below the level threshold produce no output. The whole
        entry is rendered before anything is written.

        Args:
            record: The record to emit.

        Raises:
            Exception: Whatever the sink raises, unchanged.
        """
        if not self.enabled(record.level):
            return
        data = self._renderer.render(record, self._chain)
        self._sink.write(data)

    def with_attrs(self, attrs: Iterable[Attr]) -> "PrettyHandler":
        """Return a handler that renders ``attrs`` with every record.

        An empty batch returns this handler.
        """
        chain = self._chain.bind_attrs(attrs)
        if chain is self._chain:
            return self
        return self._derive(chain)

    def with_group(self, name: str) -> "PrettyHandler":
        """Return a handler that nests later attributes under ``name``.

        An empty name returns this handler.
        """
        chain = self._chain.bind_group(name)
        if chain is self._chain:
            return self
        return self._derive(chain)

    def _derive(self, chain: ContextChain) -> "PrettyHandler":
        derived = copy.copy(self)
        derived._chain = chain
        return derived
