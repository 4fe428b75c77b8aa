"""XML printer.

Walks a read-only node tree depth-first and writes markup to a sink.

Formatting rules:
- Every node is indented with one indent_char per enclosing element and
  followed by one newline. A document adds no markup of its own, only the
  newline after its children.
- Nesting depth is not limited by the interpreter stack; pending closing
  tags are kept on an explicit work stack.
- An element with no value and no children self-closes: ``<empty/>``.
- An element whose only child is a DATA node keeps that text on the same
  line: ``<note>hi</note>``. Any other sole child (CDATA, comment, element)
  goes through the general multi-line path.
- NO_INDENTING drops all indentation and newlines, producing compact output.

Text content and attribute values are entity-expanded. Names, CDATA,
comment, doctype and processing-instruction bodies are copied verbatim.

Thread Safety:
All per-call state is encapsulated in PrintContext, created fresh for each
print() call. Multiple threads can safely share a single XmlPrinter instance.
The tree must not be mutated while it is being printed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from xmlprint.config import PrintConfig, PrintFlags, get_print_config
from xmlprint.errors import UnknownNodeKindError
from xmlprint.escaping import copy_and_expand, copy_chars, fill_chars
from xmlprint.nodes import NodeKind
from xmlprint.profiling import get_print_accumulator
from xmlprint.stringbuilder import StreamSink, StringBuilder
from xmlprint.utils.logger import get_logger

if TYPE_CHECKING:
    from xmlprint.protocols import NodeView, Sink, Writable

logger = get_logger(__name__)


class _Step(Enum):
    """Pending work on the printer's stack."""

    OPEN = auto()  # Print the node, or its opening part
    CLOSE_ELEMENT = auto()  # Indent, closing tag, newline
    CLOSE = auto()  # Newline only (document)


class _CountingSink:
    """Forwards to another sink while counting characters (profiling only)."""

    __slots__ = ("inner", "count")

    def __init__(self, inner: Sink) -> None:
        self.inner = inner
        self.count = 0

    def append(self, s: str) -> _CountingSink:
        self.count += len(s)
        self.inner.append(s)
        return self


@dataclass(slots=True)
class PrintContext:
    """Per-call state.

    Created fresh for each top-level print, so a shared XmlPrinter never
    carries state between calls. Depth is not stored here; it travels with
    each entry on the work stack.
    """

    sink: Sink
    indenting: bool
    indent_char: str
    newline: str
    node_count: int = 0


class XmlPrinter:
    """Print node trees as XML text.

    Usage:
        >>> from xmlprint.nodes import Document, Element, Data
        >>> doc = Document(children=(Element("note", children=(Data("hi"),)),))
        >>> XmlPrinter().render(doc)
        '<note>hi</note>\\n'

    Thread Safety:
        Holds only an immutable PrintConfig. Each print() call creates an
        independent PrintContext.
    """

    __slots__ = ("_config",)

    def __init__(self, config: PrintConfig | None = None) -> None:
        """Initialize printer.

        Args:
            config: Fixed configuration. If None, the context-local config
                from get_print_config() is read at each call.
        """
        self._config = config

    @property
    def config(self) -> PrintConfig:
        """Configuration the next print() call will use."""
        return self._config if self._config is not None else get_print_config()

    def print(self, sink: Sink, node: NodeView, flags: PrintFlags = PrintFlags.NONE) -> Sink:
        """Print ``node`` and its subtree to ``sink``.

        Args:
            sink: Output sink
            node: Node to print; pass a document to print a whole tree
            flags: Mode flags, combined with the config's own flags

        Returns:
            The sink, advanced past the printed text

        Raises:
            UnknownNodeKindError: A node in the tree reported an unknown kind.
                Output already written stays in the sink.
        """
        config = self.config
        flags = PrintFlags(flags) | config.flags
        logger.debug("Printing %s node (flags=%r)", getattr(node.kind, "name", node.kind), flags)

        acc = get_print_accumulator()
        out: Sink = _CountingSink(sink) if acc is not None else sink
        ctx = PrintContext(
            sink=out,
            indenting=not flags & PrintFlags.NO_INDENTING,
            indent_char=config.indent_char,
            newline=config.newline,
        )

        self._print_node(node, 0, ctx)

        if acc is not None:
            acc.record_print(ctx.node_count, out.count)  # type: ignore[attr-defined]
        logger.debug("Printed %d nodes", ctx.node_count)
        return sink

    def render(self, node: NodeView, flags: PrintFlags = PrintFlags.NONE) -> str:
        """Print ``node`` into a fresh StringBuilder and return the text."""
        sb = StringBuilder()
        self.print(sb, node, flags)
        return sb.build()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _print_node(self, root: NodeView, depth: int, ctx: PrintContext) -> None:
        """Print ``root`` and its subtree depth-first.

        Pending work lives on an explicit stack, so nesting depth is bounded
        by memory rather than the interpreter's recursion limit. Every node,
        document included, is followed by one newline unless indenting is off.
        """
        stack: list[tuple[_Step, NodeView, int]] = [(_Step.OPEN, root, depth)]
        while stack:
            step, node, level = stack.pop()
            if step is _Step.OPEN:
                self._open_node(node, level, ctx, stack)
            else:
                if step is _Step.CLOSE_ELEMENT:
                    self._indent(level, ctx)
                    self._print_end_tag(node, ctx)
                self._end_line(ctx)

    def _open_node(
        self,
        node: NodeView,
        depth: int,
        ctx: PrintContext,
        stack: list[tuple[_Step, NodeView, int]],
    ) -> None:
        """Emit everything of ``node`` that comes before its children.

        Nodes with children schedule a closing step plus the children;
        all others are finished here.
        """
        ctx.node_count += 1
        match node.kind:
            case NodeKind.DOCUMENT:
                # Transparent root: no markup, no extra depth
                stack.append((_Step.CLOSE, node, depth))
                self._push_children(node, depth, stack)
                return
            case NodeKind.ELEMENT:
                if self._print_element(node, depth, ctx):
                    stack.append((_Step.CLOSE_ELEMENT, node, depth))
                    self._push_children(node, depth + 1, stack)
                    return
            case NodeKind.DATA:
                self._print_data(node, depth, ctx)
            case NodeKind.CDATA:
                self._print_cdata(node, depth, ctx)
            case NodeKind.DECLARATION:
                self._print_declaration(node, depth, ctx)
            case NodeKind.COMMENT:
                self._print_comment(node, depth, ctx)
            case NodeKind.DOCTYPE:
                self._print_doctype(node, depth, ctx)
            case NodeKind.PI:
                self._print_pi(node, depth, ctx)
            case _:
                raise UnknownNodeKindError(node.kind)

        self._end_line(ctx)

    def _push_children(
        self, node: NodeView, depth: int, stack: list[tuple[_Step, NodeView, int]]
    ) -> None:
        """Schedule children so the first one is printed first."""
        for child in reversed(node.children):
            stack.append((_Step.OPEN, child, depth))

    def _end_line(self, ctx: PrintContext) -> None:
        if ctx.indenting:
            ctx.sink.append(ctx.newline)

    def _print_attributes(self, node: NodeView, ctx: PrintContext) -> None:
        """Print `` name="value"`` for each attribute with both parts present."""
        sink = ctx.sink
        for attribute in node.attributes:
            name = attribute.name
            value = attribute.value
            if not name or not value:
                logger.debug("Skipping attribute with missing name or value: %r", attribute)
                continue
            sink.append(" ")
            copy_chars(sink, name)
            sink.append('="')
            copy_and_expand(sink, value)
            sink.append('"')

    def _indent(self, depth: int, ctx: PrintContext) -> None:
        if ctx.indenting:
            fill_chars(ctx.sink, depth, ctx.indent_char)

    # =========================================================================
    # Kind emitters
    # =========================================================================

    def _print_element(self, node: NodeView, depth: int, ctx: PrintContext) -> bool:
        """Print an element, or its opening part when children follow.

        Returns:
            True if the children still have to be printed, followed by the
            closing tag at ``depth``
        """
        sink = ctx.sink
        self._indent(depth, ctx)
        sink.append("<")
        copy_chars(sink, node.name)
        self._print_attributes(node, ctx)

        children = node.children
        if not node.value and not children:
            sink.append("/>")
            return False

        sink.append(">")
        if not children:
            # Value only, no added whitespace
            copy_and_expand(sink, node.value)
        elif len(children) == 1 and children[0].kind is NodeKind.DATA:
            # Sole text child stays on the tag's line
            ctx.node_count += 1
            copy_and_expand(sink, children[0].value)
        else:
            if ctx.indenting:
                sink.append(ctx.newline)
            return True

        self._print_end_tag(node, ctx)
        return False

    def _print_end_tag(self, node: NodeView, ctx: PrintContext) -> None:
        ctx.sink.append("</")
        copy_chars(ctx.sink, node.name)
        ctx.sink.append(">")

    def _print_data(self, node: NodeView, depth: int, ctx: PrintContext) -> None:
        self._indent(depth, ctx)
        copy_and_expand(ctx.sink, node.value)

    def _print_cdata(self, node: NodeView, depth: int, ctx: PrintContext) -> None:
        self._indent(depth, ctx)
        ctx.sink.append("<![CDATA[")
        copy_chars(ctx.sink, node.value)
        ctx.sink.append("]]>")

    def _print_declaration(self, node: NodeView, depth: int, ctx: PrintContext) -> None:
        self._indent(depth, ctx)
        ctx.sink.append("<?xml")
        self._print_attributes(node, ctx)
        ctx.sink.append("?>")

    def _print_comment(self, node: NodeView, depth: int, ctx: PrintContext) -> None:
        self._indent(depth, ctx)
        ctx.sink.append("<!--")
        copy_chars(ctx.sink, node.value)
        ctx.sink.append("-->")

    def _print_doctype(self, node: NodeView, depth: int, ctx: PrintContext) -> None:
        self._indent(depth, ctx)
        ctx.sink.append("<!DOCTYPE ")
        copy_chars(ctx.sink, node.value)
        ctx.sink.append(">")

    def _print_pi(self, node: NodeView, depth: int, ctx: PrintContext) -> None:
        self._indent(depth, ctx)
        ctx.sink.append("<?")
        copy_chars(ctx.sink, node.name)
        ctx.sink.append(" ")
        copy_chars(ctx.sink, node.value)
        ctx.sink.append("?>")


# Shared instance for the module-level functions; reads the context config
_DEFAULT_PRINTER = XmlPrinter()


def print_node(sink: Sink, node: NodeView, flags: PrintFlags = PrintFlags.NONE) -> Sink:
    """Print ``node`` to ``sink`` and return the sink.

    Example:
        >>> sb = print_node(StringBuilder(), doc, PrintFlags.NO_INDENTING)
        >>> sb.build()
        '<root><a/></root>'
    """
    return _DEFAULT_PRINTER.print(sink, node, flags)


def print_to_stream(stream: Writable, node: NodeView) -> Writable:
    """Print ``node`` to a text stream with default flags and return the stream.

    ``stream << node`` is equivalent for the node classes in xmlprint.nodes.
    """
    _DEFAULT_PRINTER.print(StreamSink(stream), node)
    return stream


def to_string(node: NodeView, flags: PrintFlags = PrintFlags.NONE) -> str:
    """Print ``node`` and return the text."""
    return _DEFAULT_PRINTER.render(node, flags)
