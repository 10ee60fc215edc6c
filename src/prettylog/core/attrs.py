"""Helper functions for building Attr objects."""

from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Any

from prettylog.core.models import Attr, Kind, Value, any_value

# Key used for a positional argument that has no partner value
BAD_KEY = "!BADKEY"


def string(key: str, value: str) -> Attr:
    """Create a STRING attribute."""
    return Attr(key, Value(Kind.STRING, value))


def int64(key: str, value: int) -> Attr:
    """Create an INT64 attribute."""
    return Attr(key, Value(Kind.INT64, int(value)))


def uint64(key: str, value: int) -> Attr:
    """Create a UINT64 attribute."""
    return Attr(key, Value(Kind.UINT64, int(value)))


def float64(key: str, value: float) -> Attr:
    """Create a FLOAT64 attribute."""
    return Attr(key, Value(Kind.FLOAT64, float(value)))


def boolean(key: str, value: bool) -> Attr:
    """Create a BOOL attribute."""
    return Attr(key, Value(Kind.BOOL, bool(value)))


def duration(key: str, value: timedelta) -> Attr:
    """Create a DURATION attribute."""
    return Attr(key, Value(Kind.DURATION, value))


def time(key: str, value: datetime) -> Attr:
    """Create a TIME attribute."""
    return Attr(key, Value(Kind.TIME, value))


def group(key: str, *children: Any) -> Attr:
    """Create a GROUP attribute.

    Args:
        key: Group label. An empty key inlines the children.
        *children: Attr objects, or key/value pairs in the same loose
            form accepted by ``args_to_attrs``.

    Returns:
        Attr whose value holds the children in order.
    """
    return Attr(key, Value(Kind.GROUP, args_to_attrs(children)))


def any_(key: str, value: Any) -> Attr:
    """Create an attribute whose kind is inferred from the value."""
    return Attr(key, any_value(value))


def attrs_from_kwargs(**attributes: Any) -> tuple[Attr, ...]:
    """Turn keyword arguments into attributes, preserving their order."""
    return tuple(any_(key, value) for key, value in attributes.items())


def args_to_attrs(args: Iterable[Any]) -> tuple[Attr, ...]:
    """Turn loosely typed positional arguments into attributes.

    An Attr is taken as is. A string is a key whose value is the next
    argument. Anything else, or a trailing key with no value, is recorded
    under ``!BADKEY``.

    Args:
        args: Positional arguments from a log call.

    Returns:
        Tuple of attributes in argument order.
    """
    items = list(args)
    result: list[Attr] = []
    i = 0
    while i < len(items):
        item = items[i]
        if isinstance(item, Attr):
            result.append(item)
            i += 1
        elif isinstance(item, str) and i + 1 < len(items):
            result.append(any_(item, items[i + 1]))
            i += 2
        else:
            result.append(any_(BAD_KEY, item))
            i += 1
    return tuple(result)
