"""Error-path tests.

Unknown node kinds, failing sinks, and trees supplied through the view
protocols rather than the built-in node classes.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field

import pytest

from xmlprint import PrintFlags, StringBuilder, print_node, print_to_stream, to_string
from xmlprint.errors import ConfigError, PrintError, UnknownNodeKindError, XmlPrintError
from xmlprint.nodes import Data, Document, Element, NodeKind


@dataclass
class FakeAttribute:
    name: str | None
    value: str | None


@dataclass
class FakeNode:
    """Mutable stand-in for a third-party tree implementing NodeView."""

    kind: object
    name: str | None = None
    value: str | None = None
    children: list[FakeNode] = field(default_factory=list)
    attributes: list[FakeAttribute] = field(default_factory=list)


class FailingSink:
    """Sink that raises after a fixed number of appends."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.parts: list[str] = []

    def append(self, s: str) -> None:
        if len(self.parts) >= self.limit:
            raise OSError("sink closed")
        self.parts.append(s)


# =========================================================================
# Exception hierarchy
# =========================================================================


class TestErrorHierarchy:
    def test_unknown_kind_is_print_error(self) -> None:
        err = UnknownNodeKindError("bogus")
        assert isinstance(err, PrintError)
        assert isinstance(err, XmlPrintError)

    def test_unknown_kind_is_assertion_error(self) -> None:
        assert isinstance(UnknownNodeKindError("bogus"), AssertionError)

    def test_unknown_kind_message(self) -> None:
        err = UnknownNodeKindError("bogus")
        assert err.kind == "bogus"
        assert "'bogus'" in str(err)

    def test_config_error_message(self) -> None:
        err = ConfigError("newline", "must not be empty")
        assert err.option == "newline"
        assert str(err) == "Option 'newline': must not be empty"
        assert isinstance(err, XmlPrintError)


# =========================================================================
# Unknown node kinds
# =========================================================================


class TestUnknownKind:
    def test_top_level_unknown_kind_raises(self) -> None:
        with pytest.raises(UnknownNodeKindError) as exc_info:
            to_string(FakeNode(kind="entity"))  # type: ignore[arg-type]
        assert exc_info.value.kind == "entity"

    def test_nested_unknown_kind_leaves_partial_output(self) -> None:
        tree = FakeNode(
            kind=NodeKind.ELEMENT,
            name="a",
            children=[FakeNode(kind=NodeKind.ELEMENT, name="b"), FakeNode(kind=42)],
        )
        sb = StringBuilder()
        with pytest.raises(UnknownNodeKindError):
            print_node(sb, tree)  # type: ignore[arg-type]
        assert sb.build() == "<a>\n\t<b/>\n"

    def test_unknown_kind_inside_document(self) -> None:
        doc = Document(children=(Element("ok"), FakeNode(kind=None)))  # type: ignore[arg-type]
        with pytest.raises(AssertionError):
            to_string(doc)


# =========================================================================
# Sink failures
# =========================================================================


class TestSinkFailure:
    def test_sink_error_propagates_unchanged(self) -> None:
        sink = FailingSink(limit=2)
        with pytest.raises(OSError, match="sink closed"):
            print_node(sink, Element("a", children=(Data("x"),)), PrintFlags.NO_INDENTING)  # type: ignore[arg-type]

    def test_output_truncated_at_failure(self) -> None:
        sink = FailingSink(limit=3)
        with pytest.raises(OSError):
            print_node(sink, Element("root", children=(Element("a"), Element("b"))))  # type: ignore[arg-type]
        assert "".join(sink.parts) == "<root>"


# =========================================================================
# Foreign trees through the view protocols
# =========================================================================


class TestForeignTrees:
    def test_custom_view_prints_like_builtin_nodes(self) -> None:
        foreign = FakeNode(
            kind=NodeKind.DOCUMENT,
            children=[
                FakeNode(
                    kind=NodeKind.ELEMENT,
                    name="item",
                    attributes=[FakeAttribute("id", "7"), FakeAttribute("broken", None)],
                    children=[FakeNode(kind=NodeKind.DATA, value="a & b")],
                )
            ],
        )
        assert to_string(foreign) == '<item id="7">a &amp; b</item>\n\n'  # type: ignore[arg-type]

    def test_none_ranges_are_empty(self) -> None:
        foreign = FakeNode(kind=NodeKind.ELEMENT, name=None)
        assert to_string(foreign, PrintFlags.NO_INDENTING) == "</>"  # type: ignore[arg-type]

    def test_foreign_tree_prints_to_stream(self) -> None:
        foreign = FakeNode(
            kind=NodeKind.DOCUMENT,
            children=[FakeNode(kind=NodeKind.ELEMENT, name="item")],
        )
        buf = io.StringIO()
        assert print_to_stream(buf, foreign) is buf  # type: ignore[arg-type]
        assert buf.getvalue() == "<item/>\n\n"

    def test_shift_operator_needs_builtin_nodes(self) -> None:
        foreign = FakeNode(kind=NodeKind.ELEMENT, name="item")
        buf = io.StringIO()
        with pytest.raises(TypeError):
            buf << foreign  # type: ignore[operator]
        assert buf.getvalue() == ""
