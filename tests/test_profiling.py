"""Tests for xmlprint.profiling — print profiling API."""

from xmlprint import StringBuilder, print_node, to_string
from xmlprint.nodes import Data, Document, Element
from xmlprint.profiling import (
    PrintAccumulator,
    get_print_accumulator,
    profiled_print,
)

DOC = Document(children=(Element("a", children=(Data("x"),)),))


class TestGetPrintAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_print_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_print():
            pass
        assert get_print_accumulator() is None


class TestProfiledPrint:
    def test_yields_accumulator(self) -> None:
        with profiled_print() as acc:
            assert isinstance(acc, PrintAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_print() as acc:
            assert get_print_accumulator() is acc

    def test_records_print_call(self) -> None:
        with profiled_print() as acc:
            text = to_string(DOC)
        assert acc.print_calls == 1
        # Document, element and the inlined text child
        assert acc.node_count == 3
        assert acc.char_count == len(text)

    def test_records_multiple_print_calls(self) -> None:
        with profiled_print() as acc:
            to_string(DOC)
            to_string(DOC)
            to_string(Element("b"))
        assert acc.print_calls == 3
        assert acc.node_count == 7

    def test_caller_sink_receives_output(self) -> None:
        sb = StringBuilder()
        with profiled_print():
            result = print_node(sb, DOC)
        assert result is sb
        assert sb.build() == "<a>x</a>\n\n"

    def test_total_duration_non_negative(self) -> None:
        with profiled_print() as acc:
            to_string(DOC)
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = PrintAccumulator().summary()
        assert summary["print_calls"] == 0
        assert summary["node_count"] == 0
        assert summary["char_count"] == 0

    def test_summary_after_print(self) -> None:
        with profiled_print() as acc:
            to_string(DOC)
        summary = acc.summary()
        assert set(summary) == {"total_ms", "print_calls", "node_count", "char_count"}
        assert summary["char_count"] == len("<a>x</a>\n\n")
