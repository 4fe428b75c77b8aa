"""Tests for the built-in node classes."""

import dataclasses

import pytest

from xmlprint.nodes import (
    Attribute,
    CData,
    Comment,
    Data,
    Declaration,
    Doctype,
    Document,
    Element,
    NodeKind,
    ProcessingInstruction,
)


class TestKinds:
    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (Document(), NodeKind.DOCUMENT),
            (Element("a"), NodeKind.ELEMENT),
            (Data("t"), NodeKind.DATA),
            (CData("c"), NodeKind.CDATA),
            (Declaration(), NodeKind.DECLARATION),
            (Comment("m"), NodeKind.COMMENT),
            (Doctype("html"), NodeKind.DOCTYPE),
            (ProcessingInstruction("p", "v"), NodeKind.PI),
        ],
    )
    def test_kind(self, node: object, kind: NodeKind) -> None:
        assert node.kind is kind  # type: ignore[attr-defined]

    def test_kind_is_not_a_field(self) -> None:
        assert "kind" not in {f.name for f in dataclasses.fields(Element)}


class TestViewSurface:
    """Fields a kind does not carry read as None or empty."""

    def test_leaf_defaults(self) -> None:
        for node in (Data("t"), CData("c"), Comment("m"), Doctype("d")):
            assert node.name is None
            assert node.children == ()
            assert node.attributes == ()

    def test_document_defaults(self) -> None:
        doc = Document()
        assert doc.name is None
        assert doc.value is None
        assert doc.children == ()
        assert doc.attributes == ()

    def test_declaration_defaults(self) -> None:
        decl = Declaration(attributes=(Attribute("version", "1.0"),))
        assert decl.name is None
        assert decl.value is None
        assert decl.children == ()

    def test_processing_instruction_defaults(self) -> None:
        pi = ProcessingInstruction("target", "body")
        assert (pi.name, pi.value) == ("target", "body")
        assert pi.children == ()
        assert pi.attributes == ()

    def test_element_defaults(self) -> None:
        el = Element("a")
        assert el.attributes == ()
        assert el.children == ()
        assert el.value is None


class TestImmutability:
    def test_nodes_are_frozen(self) -> None:
        el = Element("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            el.name = "b"  # type: ignore[misc]

    def test_attributes_are_frozen(self) -> None:
        attr = Attribute("a", "1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            attr.value = "2"  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        a = Element("a", children=(Data("x"),))
        b = Element("a", children=(Data("x"),))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_kinds_not_equal(self) -> None:
        assert Data("x") != Comment("x")
