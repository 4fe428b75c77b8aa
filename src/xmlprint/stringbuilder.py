"""Output sinks for the printer.

StringBuilder accumulates output in memory: it appends to a list and joins
once at the end, O(n) total vs O(n²) for repeated string concatenation.

StreamSink adapts any object with a text ``write`` method (files,
io.StringIO, sys.stdout, socket wrappers) to the Sink protocol.

Thread Safety:
Sink instances are local to each print call.
No shared mutable state.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmlprint.protocols import Writable


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<a>")
            >>> sb.append("text")
            >>> sb.append("</a>")
            >>> sb.build()
            '<a>text</a>'

    Thread Safety:
        Instance is local to each print call.
        No shared mutable state.

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)


class StreamSink:
    """Sink that forwards every chunk to a text stream.

    Nothing is buffered here; whatever the stream does on ``write`` (block,
    raise, buffer) happens immediately.

    Usage:
            >>> import io
            >>> buf = io.StringIO()
            >>> StreamSink(buf).append("<a/>")
            >>> buf.getvalue()
            '<a/>'

    """

    __slots__ = ("stream",)

    def __init__(self, stream: Writable) -> None:
        """Wrap a stream.

        Args:
            stream: Object with a ``write(str)`` method
        """
        self.stream = stream

    def append(self, s: str) -> StreamSink:
        """Write a string to the stream (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self.stream.write(s)
        return self
