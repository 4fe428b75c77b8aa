"""Exception classes for xmlprint.

Provides standardized exceptions for error handling throughout xmlprint.

Malformed attributes and absent values are not errors: the printer skips or
emits nothing for them. Exceptions raised by a sink are never wrapped; they
propagate to the caller unchanged.
"""

from __future__ import annotations


class XmlPrintError(Exception):
    """Base exception for all xmlprint errors.

    Subclass this for specific error categories.
    """

    pass


class PrintError(XmlPrintError):
    """Error during printing.

    Raised when the printer encounters a node it cannot serialize.
    """

    pass


class UnknownNodeKindError(PrintError, AssertionError):
    """A node reported a kind outside the closed NodeKind set.

    This is an invariant violation in the tree provider, not a recoverable
    condition. It also derives from AssertionError so it reads as one in
    tracebacks and test failures.
    """

    def __init__(self, kind: object) -> None:
        """Initialize with the offending kind.

        Args:
            kind: Whatever the node reported as its kind
        """
        self.kind = kind
        super().__init__(f"Unknown node kind: {kind!r}")


class ConfigError(XmlPrintError):
    """Invalid printer configuration.

    Raised by PrintConfig when an option has an unusable value.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "indent_char")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
