"""Text forms for log values and the recursive attribute formatter."""

import json
import re
from datetime import datetime, timedelta

from prettylog.core.colors import DEFAULT_THEME, ColorTheme, colorize
from prettylog.core.models import Attr, Kind, Value
from prettylog.core.options import Options

# Children of a record-level group in inline mode always get this depth
INLINE_GROUP_DEPTH = 2

INDENT = "  "

_TIME_DIRECTIVE = re.compile(r"%%|%3f")

_US_PER_MS = 1_000
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


def format_time(value: datetime, pattern: str) -> str:
    """Format a datetime with a strftime pattern.

    Besides the usual directives, ``%3f`` expands to zero-padded
    milliseconds.

    Args:
        value: The datetime to format.
        pattern: strftime pattern.

    Returns:
        The formatted timestamp.
    """
    millis = f"{value.microsecond // 1000:03d}"
    expanded = _TIME_DIRECTIVE.sub(
        lambda m: m.group(0) if m.group(0) == "%%" else millis, pattern
    )
    return value.strftime(expanded)


def _fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Format a timedelta in compact unit notation.

    Examples: ``0s``, ``750µs``, ``1.5ms``, ``2s``, ``5m0s``, ``1h2m3.5s``.

    Args:
        value: The duration to format.

    Returns:
        The formatted duration.
    """
    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < _US_PER_MS:
        return f"{sign}{micros}µs"
    if micros < _US_PER_SECOND:
        return f"{sign}{_fraction(micros, _US_PER_MS)}ms"

    hours, rest = divmod(micros, _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    text = f"{_fraction(rest, _US_PER_SECOND)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


def format_float(value: float) -> str:
    """Shortest round-trip text for a float."""
    return repr(value)


def quote(text: str) -> str:
    """Double-quote a string, escaping quotes and control characters."""
    return json.dumps(text, ensure_ascii=False)


class AttributeFormatter:
    """Renders attributes, recursing into groups.

    Inline mode appends `` key=value`` pieces. Multiline mode appends one
    ``indent + key: value`` line per attribute, where indent is two spaces
    per depth level.
    """

    def __init__(self, options: Options, theme: ColorTheme = DEFAULT_THEME) -> None:
        """Initialize the formatter.

        Args:
            options: Rendering options (colors and time format are used).
            theme: Colors for keys and values.
        """
        self._options = options
        self._theme = theme

    def format_value(self, value: Value, multiline: bool) -> str:
        """Return the uncolored text for a resolved, non-group value.

        Args:
            value: Resolved value.
            multiline: Strings and times are quoted only in inline mode.

        Returns:
            Text form of the value.
        """
        kind = value.kind
        payload = value.payload
        if kind is Kind.STRING:
            return payload if multiline else quote(payload)
        if kind is Kind.TIME:
            text = format_time(payload, self._options.time_format)
            return text if multiline else quote(text)
        if kind is Kind.BOOL:
            return "true" if payload else "false"
        if kind in (Kind.INT64, Kind.UINT64):
            return str(payload)
        if kind is Kind.FLOAT64:
            return format_float(payload)
        if kind is Kind.DURATION:
            return format_duration(payload)
        # ANY and any kind added later
        return str(payload)

    def append_attr(
        self, buf: list[str], attr: Attr, multiline: bool, depth: int
    ) -> None:
        """Append the rendering of one attribute to ``buf``.

        Tombstone attributes and groups without children append nothing.

        Args:
            buf: Output pieces, joined by the caller.
            attr: Attribute to render.
            multiline: Layout mode.
            depth: Indentation depth (multiline mode only).
        """
        attr = Attr(attr.key, attr.value.resolve())
        if attr.is_empty():
            return
        value = attr.value

        if self._options.colorful:
            key_color: int | None = self._theme.key
            value_color: int | None = self._theme.value
        else:
            key_color = value_color = None

        key = colorize(key_color, attr.key)
        indent = INDENT * depth

        if value.kind is Kind.GROUP:
            children = value.group()
            if not children:
                return
            if not attr.key:
                for child in children:
                    self.append_attr(buf, child, multiline, depth)
                return
            if multiline:
                buf.append(f"{indent}{key}:\n")
                for child in children:
                    self.append_attr(buf, child, multiline, depth + 1)
            else:
                buf.append(f" {key}:")
                for child in children:
                    self.append_attr(buf, child, multiline, INLINE_GROUP_DEPTH)
            return

        text = colorize(value_color, self.format_value(value, multiline))
        if multiline:
            buf.append(f"{indent}{key}: {text}\n")
        else:
            buf.append(f" {key}={text}")
