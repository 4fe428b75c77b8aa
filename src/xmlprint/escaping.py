"""Character copying and entity expansion.

Every character is copied as-is except the five XML reserved characters,
which ``copy_and_expand`` replaces with named references:

    <  &lt;     >  &gt;     '  &apos;     "  &quot;     &  &amp;

No encoding awareness: non-ASCII and control characters pass through
untouched. None and "" both produce no output.

Example:
    >>> from xmlprint.escaping import expand_entities
    >>> expand_entities('a < b & "c"')
    'a &lt; b &amp; &quot;c&quot;'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmlprint.protocols import Sink

ENTITY_REFERENCES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "'": "&apos;",
    '"': "&quot;",
    "&": "&amp;",
}

# str.translate table, built once
_EXPAND_TABLE = str.maketrans(ENTITY_REFERENCES)


def expand_entities(text: str | None) -> str:
    """Return ``text`` with the five reserved characters expanded.

    Args:
        text: Text to escape (None is treated as empty)

    Returns:
        Escaped text, safe inside element content and double-quoted attributes
    """
    if not text:
        return ""
    return text.translate(_EXPAND_TABLE)


def copy_and_expand(sink: Sink, text: str | None) -> None:
    """Append ``text`` to ``sink`` with entity expansion."""
    if text:
        sink.append(text.translate(_EXPAND_TABLE))


def copy_chars(sink: Sink, text: str | None) -> None:
    """Append ``text`` to ``sink`` verbatim."""
    if text:
        sink.append(text)


def fill_chars(sink: Sink, count: int, char: str) -> None:
    """Append ``count`` repetitions of ``char`` (used for indentation)."""
    if count > 0:
        sink.append(char * count)
