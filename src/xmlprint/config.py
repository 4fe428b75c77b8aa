"""ContextVar-based print configuration for xmlprint.

Provides context-local defaults using Python's ContextVars (PEP 567).
Explicit flags passed to print_node() are combined with the active config.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Per call
    print_node(sink, doc, PrintFlags.NO_INDENTING)

    # Context-wide default
    from xmlprint.config import print_config_context, PrintConfig

    with print_config_context(PrintConfig(no_indenting=True)):
        text = to_string(doc)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import IntFlag

from xmlprint.errors import ConfigError


class PrintFlags(IntFlag):
    """Mode flags for a single print call."""

    NONE = 0
    NO_INDENTING = 0x1  # No indentation and no line breaks between nodes


@dataclass(frozen=True, slots=True)
class PrintConfig:
    """Immutable print configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        no_indenting: Suppress indentation and trailing line breaks
        indent_char: Character repeated once per depth level
        newline: Line break written after each node

    """

    no_indenting: bool = False
    indent_char: str = "\t"
    newline: str = "\n"

    def __post_init__(self) -> None:
        if len(self.indent_char) != 1:
            raise ConfigError("indent_char", f"must be a single character, got {self.indent_char!r}")
        if not self.newline:
            raise ConfigError("newline", "must not be empty")

    @property
    def flags(self) -> PrintFlags:
        """Flags implied by this config."""
        return PrintFlags.NO_INDENTING if self.no_indenting else PrintFlags.NONE

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PrintConfig":
        """Create PrintConfig from dictionary.

        Only includes keys that are valid PrintConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                PrintConfig attribute names.

        Returns:
            New PrintConfig instance with values from dict.

        Raises:
            ConfigError: If a recognized value is invalid.

        Example:
            >>> config = PrintConfig.from_dict({
            ...     "no_indenting": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.no_indenting
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PrintConfig = PrintConfig()

_print_config: ContextVar[PrintConfig] = ContextVar(
    "print_config",
    default=_DEFAULT_CONFIG,
)


def get_print_config() -> PrintConfig:
    """Get current print configuration (thread-local)."""
    return _print_config.get()


def set_print_config(config: PrintConfig) -> None:
    """Set print configuration for current context.

    Args:
        config: PrintConfig instance to use for this context.

    """
    _print_config.set(config)


def reset_print_config() -> None:
    """Reset to default configuration."""
    _print_config.set(_DEFAULT_CONFIG)


@contextmanager
def print_config_context(config: PrintConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: PrintConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _print_config.get()
    _print_config.set(config)
    try:
        yield
    finally:
        _print_config.set(previous)


__all__ = [
    "PrintConfig",
    "PrintFlags",
    "get_print_config",
    "set_print_config",
    "reset_print_config",
    "print_config_context",
]
