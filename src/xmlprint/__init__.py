"""
xmlprint — XML printer for read-only node trees

Serializes an already-built XML-like tree back to markup text: elements,
text, CDATA sections, comments, doctypes, declarations and processing
instructions. Tab-indented output by default, compact output on request.
No parsing, no validation, zero runtime dependencies.

Quick Start:
    >>> from xmlprint import Document, Element, Data, Attribute, to_string
    >>> doc = Document(children=(
    ...     Element("note", attributes=(Attribute("lang", "en"),), children=(Data("hi"),)),
    ... ))
    >>> print(to_string(doc), end="")
    <note lang="en">hi</note>

    >>> # Compact output into any sink
    >>> from xmlprint import PrintFlags, StringBuilder, print_node
    >>> print_node(StringBuilder(), doc, PrintFlags.NO_INDENTING).build()
    '<note lang="en">hi</note>'

    >>> # Streams
    >>> import sys
    >>> sys.stdout << doc  # doctest: +SKIP

Custom Trees:
    Any object exposing ``kind``, ``name``, ``value``, ``children`` and
    ``attributes`` (see xmlprint.protocols.NodeView) can be printed.
    ``stream << node`` is only defined on the classes in xmlprint.nodes;
    other trees go through ``print_to_stream(stream, tree)``.
"""

from xmlprint.config import (
    PrintConfig,
    PrintFlags,
    get_print_config,
    print_config_context,
    reset_print_config,
    set_print_config,
)
from xmlprint.errors import ConfigError, PrintError, UnknownNodeKindError, XmlPrintError
from xmlprint.escaping import expand_entities
from xmlprint.nodes import (
    AnyNode,
    Attribute,
    CData,
    Comment,
    Data,
    Declaration,
    Doctype,
    Document,
    Element,
    Node,
    NodeKind,
    ProcessingInstruction,
)
from xmlprint.printer import XmlPrinter, print_node, print_to_stream, to_string
from xmlprint.profiling import PrintAccumulator, get_print_accumulator, profiled_print
from xmlprint.protocols import AttributeView, NodeView, Sink, Writable
from xmlprint.stringbuilder import StreamSink, StringBuilder

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "print_node",
    "print_to_stream",
    "to_string",
    "XmlPrinter",
    # Configuration
    "PrintConfig",
    "PrintFlags",
    "get_print_config",
    "set_print_config",
    "reset_print_config",
    "print_config_context",
    # Nodes
    "AnyNode",
    "Attribute",
    "CData",
    "Comment",
    "Data",
    "Declaration",
    "Doctype",
    "Document",
    "Element",
    "Node",
    "NodeKind",
    "ProcessingInstruction",
    # Protocols
    "AttributeView",
    "NodeView",
    "Sink",
    "Writable",
    # Sinks
    "StreamSink",
    "StringBuilder",
    # Escaping
    "expand_entities",
    # Profiling
    "PrintAccumulator",
    "get_print_accumulator",
    "profiled_print",
    # Errors
    "XmlPrintError",
    "PrintError",
    "UnknownNodeKindError",
    "ConfigError",
]
