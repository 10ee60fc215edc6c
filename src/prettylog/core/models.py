"""Core domain models for structured log records."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum, IntEnum
from typing import Any, Protocol, runtime_checkable

# Upper bound on chained log_value() calls before resolution gives up
_MAX_LOG_VALUER_DEPTH = 100

_INT64_MAX = 2**63 - 1


class Level(IntEnum):
    """Named severity levels on the standard ``logging`` scale.

    Any integer is a valid level; these are the four that carry a label
    and a color of their own.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


class Kind(Enum):
    """Closed set of value kinds understood by the formatter."""

    ANY = "any"
    BOOL = "bool"
    DURATION = "duration"
    FLOAT64 = "float64"
    INT64 = "int64"
    STRING = "string"
    TIME = "time"
    UINT64 = "uint64"
    GROUP = "group"
    LOG_VALUER = "log_valuer"


@runtime_checkable
class LogValuer(Protocol):
    """An object that computes its own loggable value on demand."""

    def log_value(self) -> Any:
        """Return the value to log in place of this object."""
        ...


@dataclass(frozen=True)
class Value:
    """A tagged log value.

    Attributes:
        kind: The kind tag used for formatting dispatch.
        payload: The underlying Python object. For GROUP values this is a
            tuple of Attr.
    """

    kind: Kind = Kind.ANY
    payload: Any = None

    def resolve(self) -> "Value":
        """Force deferred LOG_VALUER values into a concrete kind.

        Returns:
            The first non-LOG_VALUER value reached. If ``log_value()`` raises,
            an ANY value holding the exception; if resolution does not settle
            within the depth limit, an ANY value describing the problem.
        """
        value = self
        for _ in range(_MAX_LOG_VALUER_DEPTH):
            if value.kind is not Kind.LOG_VALUER:
                return value
            try:
                value = any_value(value.payload.log_value())
            except Exception as exc:
                return Value(Kind.ANY, exc)
        if value.kind is not Kind.LOG_VALUER:
            return value
        return Value(
            Kind.ANY,
            f"LogValue called too many times on {type(value.payload).__name__}",
        )

    def group(self) -> tuple["Attr", ...]:
        """Return the children of a GROUP value (empty for other kinds)."""
        if self.kind is Kind.GROUP:
            return self.payload
        return ()


@dataclass(frozen=True)
class Attr:
    """A key paired with a Value.

    ``Attr()`` (empty key, zero value) is a tombstone that renders as nothing.
    """

    key: str = ""
    value: Value = field(default_factory=Value)

    def is_empty(self) -> bool:
        """Return True for the zero-valued tombstone attribute."""
        value = self.value
        return self.key == "" and value.kind is Kind.ANY and value.payload is None


@dataclass(frozen=True)
class Source:
    """Caller location of a log call.

    Attributes:
        file: Path of the source file.
        line: Line number within the file.
        function: Name of the calling function.
    """

    file: str
    line: int
    function: str = ""


@dataclass(frozen=True)
class Record:
    """One structured log event.

    Attributes:
        time: When the event happened. None renders without a timestamp.
        level: Severity level; any integer on the ``logging`` scale.
        message: The log message.
        source: Caller location, if captured.
        attrs: The record's own attributes, in call order.
    """

    time: datetime | None
    level: int
    message: str
    source: Source | None = None
    attrs: tuple[Attr, ...] = ()

    def num_attrs(self) -> int:
        """Return the number of attributes carried by the record itself."""
        return len(self.attrs)


def any_value(value: Any) -> Value:
    """Infer the Value kind for an arbitrary Python object.

    Args:
        value: The object to wrap.

    Returns:
        A Value tagged with the most specific kind that fits.
    """
    if isinstance(value, Value):
        return value
    if isinstance(value, bool):
        return Value(Kind.BOOL, value)
    if isinstance(value, int):
        if value > _INT64_MAX:
            return Value(Kind.UINT64, value)
        return Value(Kind.INT64, value)
    if isinstance(value, float):
        return Value(Kind.FLOAT64, value)
    if isinstance(value, str):
        return Value(Kind.STRING, value)
    if isinstance(value, timedelta):
        return Value(Kind.DURATION, value)
    if isinstance(value, datetime):
        return Value(Kind.TIME, value)
    if isinstance(value, (list, tuple)) and value and all(
        isinstance(item, Attr) for item in value
    ):
        return Value(Kind.GROUP, tuple(value))
    if isinstance(value, LogValuer):
        return Value(Kind.LOG_VALUER, value)
    return Value(Kind.ANY, value)
