"""Protocols for xmlprint.

Defines the read-only tree views the printer consumes and the output sinks
it writes to. Any tree that exposes these attributes can be printed; the
printer never needs the concrete classes from nodes.py.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from xmlprint.nodes import NodeKind


class AttributeView(Protocol):
    """Read-only attribute.

    A missing name or value (None or empty) means the attribute is skipped.

    """

    @property
    def name(self) -> str | None: ...

    @property
    def value(self) -> str | None: ...


class NodeView(Protocol):
    """Read-only node.

    Thread Safety:
        The printer only reads these attributes. Printing the same tree from
        several threads is safe as long as nothing mutates it meanwhile.

    """

    @property
    def kind(self) -> NodeKind: ...

    @property
    def name(self) -> str | None: ...

    @property
    def value(self) -> str | None: ...

    @property
    def children(self) -> Sequence[NodeView]: ...

    @property
    def attributes(self) -> Sequence[AttributeView]: ...


class Sink(Protocol):
    """Append-only text output.

    The built-in ``StringBuilder`` and ``StreamSink`` conform to this
    protocol. Exceptions raised by ``append`` propagate out of the printer
    unchanged.

    """

    def append(self, s: str) -> object:
        """Append a chunk of text."""
        ...


class Writable(Protocol):
    """Anything with a text ``write`` method (files, io.StringIO, sys.stdout)."""

    def write(self, s: str, /) -> object: ...
