"""Immutable chain of bound groups and attribute batches.

Every derived handler owns one ContextChain. Deriving never mutates the
receiver: a new chain is built from the old one plus exactly one element,
so handlers that share an ancestor share its elements by reference and
never see each other's additions.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from prettylog.core.models import Attr


@dataclass(frozen=True)
class GroupOrAttrs:
    """One chain element: either a group-name marker or a batch of attrs.

    Attributes:
        group: Group name. Non-empty for group markers, empty for batches.
        attrs: Attributes bound by one derivation call.
    """

    group: str = ""
    attrs: tuple[Attr, ...] = ()

    @property
    def is_group(self) -> bool:
        return self.group != ""


@dataclass(frozen=True)
class ContextChain:
    """Ordered, append-only sequence of GroupOrAttrs."""

    elements: tuple[GroupOrAttrs, ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[GroupOrAttrs]:
        return iter(self.elements)

    def bind_attrs(self, batch: Iterable[Attr]) -> "ContextChain":
        """Return a chain with one attribute batch appended.

        Args:
            batch: Attributes to bind.

        Returns:
            ``self`` when the batch is empty, otherwise a new chain.
        """
        attrs = tuple(batch)
        if not attrs:
            return self
        return ContextChain(self.elements + (GroupOrAttrs(attrs=attrs),))

    def bind_group(self, name: str) -> "ContextChain":
        """Return a chain with one group marker appended.

        Args:
            name: Group name.

        Returns:
            ``self`` when the name is empty, otherwise a new chain.
        """
        if not name:
            return self
        return ContextChain(self.elements + (GroupOrAttrs(group=name),))


def elide_empty_groups(chain: ContextChain, num_attrs: int) -> ContextChain:
    """Drop trailing group markers that would have nothing beneath them.

    Only applies when the record carries no attributes of its own. The
    returned chain is local to one render call; ``chain`` is left as is.

    Args:
        chain: The handler's bound chain.
        num_attrs: Number of attributes on the record being rendered.

    Returns:
        The effective chain to render.
    """
    if num_attrs:
        return chain
    end = len(chain.elements)
    while end > 0 and chain.elements[end - 1].is_group:
        end -= 1
    if end == len(chain.elements):
        return chain
    return ContextChain(chain.elements[:end])
