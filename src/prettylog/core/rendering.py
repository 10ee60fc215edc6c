"""Record renderer: header, bound chain and record attributes in one buffer."""

from pathlib import PurePath

from prettylog.core.chain import ContextChain, elide_empty_groups
from prettylog.core.colors import DEFAULT_THEME, ColorTheme, colorize
from prettylog.core.formatting import INDENT, AttributeFormatter, format_time
from prettylog.core.models import Level, Record
from prettylog.core.options import Options

# Column width the level label is padded to
LEVEL_WIDTH = 7

_LEVEL_NAMES = (
    (Level.ERROR, "ERROR"),
    (Level.WARN, "WARN"),
    (Level.INFO, "INFO"),
    (Level.DEBUG, "DEBUG"),
)


def level_label(level: int) -> str:
    """Return the display label for a level.

    Named levels map to their name. Other levels are shown relative to the
    nearest named level below them, e.g. ``ERROR+10`` or ``INFO+5``; levels
    below DEBUG are shown as ``DEBUG-n``.

    Args:
        level: Level number.

    Returns:
        Label text.
    """
    for base, name in _LEVEL_NAMES:
        if level >= base:
            offset = level - base
            return name if offset == 0 else f"{name}+{offset}"
    return f"DEBUG{level - Level.DEBUG}"


class Renderer:
    """Turns a record plus a bound chain into the bytes of one log entry.

    Rendering is a pure function of its inputs; the chain is never modified.
    """

    def __init__(self, options: Options, theme: ColorTheme = DEFAULT_THEME) -> None:
        self._options = options
        self._theme = theme
        self._formatter = AttributeFormatter(options, theme)

    def _color(self, color: int | None) -> int | None:
        return color if self._options.colorful else None

    def render(self, record: Record, chain: ContextChain) -> bytes:
        """Render one record.

        Args:
            record: The record to render.
            chain: Bound groups and attributes of the emitting handler.

        Returns:
            UTF-8 encoded text of the entry, ending in a newline.
        """
        buf: list[str] = []
        self.append_header(buf, record)
        effective = elide_empty_groups(chain, record.num_attrs())

        if self._options.multiline:
            buf.append("\n")
            depth = self._append_multiline_chain(buf, effective)
            for attr in record.attrs:
                self._formatter.append_attr(buf, attr, True, depth)
        else:
            self._append_inline_chain(buf, effective)
            for attr in record.attrs:
                self._formatter.append_attr(buf, attr, False, 0)
            buf.append("\n")

        return "".join(buf).encode("utf-8")

    def append_header(self, buf: list[str], record: Record) -> None:
        """Append timestamp, level, message and optional source location."""
        if record.time is not None:
            stamp = format_time(record.time, self._options.time_format)
            buf.append(f"{colorize(self._color(self._theme.timestamp), stamp)} ")

        label = level_label(record.level)
        padding = " " * max(0, LEVEL_WIDTH - len(label))
        level_color = self._color(self._theme.level(record.level))
        buf.append(f"{colorize(level_color, label)}{padding}")

        message = colorize(self._color(self._theme.message), record.message)
        buf.append(f" {message}")

        if self._options.add_source and record.source is not None:
            file = PurePath(record.source.file).name
            source = f"source: {file}:{record.source.line}"
            buf.append(f" {colorize(self._color(self._theme.source), source)}")

    def _append_multiline_chain(self, buf: list[str], chain: ContextChain) -> int:
        """Append bound groups and attrs; return the depth for record attrs."""
        depth = 1
        group_color = self._color(self._theme.group)
        for goa in chain:
            if goa.is_group:
                buf.append(f"{INDENT * depth}{colorize(group_color, goa.group)}:\n")
                depth += 1
            else:
                for attr in goa.attrs:
                    self._formatter.append_attr(buf, attr, True, depth)
        return depth

    def _append_inline_chain(self, buf: list[str], chain: ContextChain) -> None:
        group_color = self._color(self._theme.group_inline)
        for goa in chain:
            if goa.is_group:
                buf.append(f" {colorize(group_color, goa.group)}:")
            else:
                for attr in goa.attrs:
                    self._formatter.append_attr(buf, attr, False, 0)
