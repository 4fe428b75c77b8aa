"""Typed XML nodes for xmlprint.

The printer reads trees through the NodeView protocol (see protocols.py) and
never builds them. The classes here are a small ready-made implementation of
that protocol, for callers that assemble trees by hand and for tests.

All nodes are frozen dataclasses with slots for:
- Immutability: the printer can never modify what it walks
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Document
├── Element
├── Data
├── CData
├── Declaration
├── Comment
├── Doctype
└── ProcessingInstruction

Every node exposes the full view surface (kind, name, value, children,
attributes). Fields a kind does not carry are properties reading None or an
empty tuple.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, TypeAlias

if TYPE_CHECKING:
    from xmlprint.protocols import Writable


class NodeKind(Enum):
    """The closed set of node kinds the printer understands."""

    DOCUMENT = auto()
    ELEMENT = auto()
    DATA = auto()  # Text content
    CDATA = auto()
    DECLARATION = auto()  # <?xml ...?>
    COMMENT = auto()
    DOCTYPE = auto()
    PI = auto()  # Processing instruction


@dataclass(frozen=True, slots=True)
class Attribute:
    """Name/value pair on an element or declaration.

    Either part may be None; such attributes are skipped when printing.

    """

    name: str | None
    value: str | None


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes.

    Provides the ``stream << node`` shorthand.

    """

    kind: ClassVar[NodeKind]

    def __rlshift__(self, stream: Writable) -> Writable:
        """Print this node to ``stream`` with default flags.

        Enables ``sys.stdout << doc``. Returns the stream, so writes chain:
        ``out << decl << root`` prints both nodes.
        """
        from xmlprint.printer import print_to_stream

        return print_to_stream(stream, self)


# =============================================================================
# Container Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root of a tree.

    Contributes no markup of its own; printing a document prints its
    children in order.

    """

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: tuple[AnyNode, ...] = ()

    @property
    def name(self) -> None:
        return None

    @property
    def value(self) -> None:
        return None

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Element(Node):
    """Element with optional attributes, children and direct value.

    XML: <name a="1">value or children</name>

    The value is printed only when the element has no children.

    """

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    name: str | None
    attributes: tuple[Attribute, ...] = ()
    children: tuple[AnyNode, ...] = ()
    value: str | None = None


# =============================================================================
# Leaf Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class _ValueLeaf(Node):
    """Childless, unnamed node carrying only a value."""

    value: str | None

    @property
    def name(self) -> None:
        return None

    @property
    def children(self) -> tuple[AnyNode, ...]:
        return ()

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Data(_ValueLeaf):
    """Character data (text content). Escaped on output."""

    kind: ClassVar[NodeKind] = NodeKind.DATA


@dataclass(frozen=True, slots=True)
class CData(_ValueLeaf):
    """CDATA section.

    XML: <![CDATA[value]]>

    """

    kind: ClassVar[NodeKind] = NodeKind.CDATA


@dataclass(frozen=True, slots=True)
class Comment(_ValueLeaf):
    """Comment.

    XML: <!--value-->

    """

    kind: ClassVar[NodeKind] = NodeKind.COMMENT


@dataclass(frozen=True, slots=True)
class Doctype(_ValueLeaf):
    """Document type declaration.

    XML: <!DOCTYPE value>

    """

    kind: ClassVar[NodeKind] = NodeKind.DOCTYPE


@dataclass(frozen=True, slots=True)
class Declaration(Node):
    """XML declaration.

    XML: <?xml version="1.0" encoding="utf-8"?>

    """

    kind: ClassVar[NodeKind] = NodeKind.DECLARATION

    attributes: tuple[Attribute, ...] = ()

    @property
    def name(self) -> None:
        return None

    @property
    def value(self) -> None:
        return None

    @property
    def children(self) -> tuple[AnyNode, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class ProcessingInstruction(Node):
    """Processing instruction.

    XML: <?name value?>

    """

    kind: ClassVar[NodeKind] = NodeKind.PI

    name: str | None
    value: str | None

    @property
    def children(self) -> tuple[AnyNode, ...]:
        return ()

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return ()


# Type alias for any concrete node
AnyNode: TypeAlias = (
    Document
    | Element
    | Data
    | CData
    | Declaration
    | Comment
    | Doctype
    | ProcessingInstruction
)
