"""Port interfaces between the core and its adapters.

The core renders records and hands finished bytes to a SinkPort. Front ends
such as Logger talk to a handler only through HandlerPort.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from prettylog.core.models import Attr, Record


@runtime_checkable
class SinkPort(Protocol):
    """Port for the destination of rendered log entries.

    Adapters implementing this protocol write one entry per call.
    Examples: OutputSink.
    """

    def write(self, data: bytes) -> None:
        """Write one rendered entry. Errors propagate to the caller."""
        ...


@runtime_checkable
class HandlerPort(Protocol):
    """Port for the logger capability set.

    Examples: PrettyHandler.
    """

    def enabled(self, level: int) -> bool:
        """Report whether records at this level would be emitted."""
        ...

    def handle(self, record: Record) -> None:
        """Render and write a record."""
        ...

    def with_attrs(self, attrs: Iterable[Attr]) -> "HandlerPort":
        """Return a handler that adds these attributes to every record."""
        ...

    def with_group(self, name: str) -> "HandlerPort":
        """Return a handler that nests later attributes under a group."""
        ...
