"""PrintAccumulator — opt-in profiling for printing.

This module provides accumulated metrics during printing:
- Total time in the profiled block
- Nodes printed
- Characters written

Zero overhead when disabled (get_print_accumulator() returns None).

Example:
    from xmlprint import to_string
    from xmlprint.profiling import profiled_print

    with profiled_print() as metrics:
        text = to_string(doc)

    print(metrics.summary())
    # {"total_ms": 0.4, "print_calls": 1, "node_count": 12, "char_count": 230}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class PrintAccumulator:
    """Accumulated metrics during printing.

    Attributes:
        start_time: Profiling start timestamp.
        print_calls: Number of top-level print calls recorded.
        node_count: Number of nodes printed (document nodes included).
        char_count: Number of characters appended to sinks.

    """

    start_time: float = field(default_factory=perf_counter)
    print_calls: int = 0
    node_count: int = 0
    char_count: int = 0

    def record_print(self, node_count: int, char_count: int) -> None:
        """Record a top-level print call.

        Args:
            node_count: Number of nodes visited by the call.
            char_count: Number of characters the call wrote.

        """
        self.print_calls += 1
        self.node_count += node_count
        self.char_count += char_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of print metrics.

        Returns:
            Dict with total_ms, print_calls, node_count, char_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "print_calls": self.print_calls,
            "node_count": self.node_count,
            "char_count": self.char_count,
        }


_accumulator: ContextVar[PrintAccumulator | None] = ContextVar(
    "print_accumulator",
    default=None,
)


def get_print_accumulator() -> PrintAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_print() -> Iterator[PrintAccumulator]:
    """Context manager for profiled printing.

    Creates a PrintAccumulator and makes it available via
    get_print_accumulator() for the duration of the with block.

    Yields:
        PrintAccumulator that will be populated during print calls.

    """
    acc = PrintAccumulator()
    token: Token[PrintAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
