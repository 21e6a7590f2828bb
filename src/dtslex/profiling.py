"""dtslex RetokenizeAccumulator — opt-in profiling for incremental passes.

This module provides accumulated metrics across re-tokenization passes:
- Number of passes
- Lines scanned (the cost of each pass)
- Passes that stopped at a fixed point vs. ran to end of document

Zero overhead when disabled (get_retokenize_accumulator() returns None).

Example:
    from dtslex import TokenizedDocument
    from dtslex.profiling import profiled_retokenize

    doc = TokenizedDocument(source)
    with profiled_retokenize() as metrics:
        doc.set_line(5, "/* opened")

    print(metrics.summary())
    # {"total_ms": 0.4, "passes": 1, "lines_scanned": 95, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RetokenizeAccumulator:
    """Accumulated metrics across incremental re-tokenization passes.

    Attributes:
        start_time: Profiling start timestamp.
        passes: Number of passes recorded.
        lines_scanned: Total lines handed to the scanner.
        converged_passes: Passes that stopped at a fixed point before
            the end of the document.
        last_pass_lines: Lines scanned by the most recent pass.

    """

    start_time: float = field(default_factory=perf_counter)
    passes: int = 0
    lines_scanned: int = 0
    converged_passes: int = 0
    last_pass_lines: int = 0

    def record_pass(self, lines_scanned: int, *, converged: bool) -> None:
        """Record one propagation pass.

        Args:
            lines_scanned: Lines re-scanned during the pass.
            converged: True if the pass stopped at a fixed point.

        """
        self.passes += 1
        self.lines_scanned += lines_scanned
        self.last_pass_lines = lines_scanned
        if converged:
            self.converged_passes += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of re-tokenization metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "passes": self.passes,
            "lines_scanned": self.lines_scanned,
            "converged_passes": self.converged_passes,
            "last_pass_lines": self.last_pass_lines,
        }


_accumulator: ContextVar[RetokenizeAccumulator | None] = ContextVar(
    "retokenize_accumulator",
    default=None,
)


def get_retokenize_accumulator() -> RetokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_retokenize() -> Iterator[RetokenizeAccumulator]:
    """Context manager for profiled re-tokenization.

    Creates a RetokenizeAccumulator and makes it available via
    get_retokenize_accumulator() for the duration of the with block.

    Yields:
        RetokenizeAccumulator populated by every pass run inside the block.

    """
    acc = RetokenizeAccumulator()
    token: Token[RetokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "RetokenizeAccumulator",
    "get_retokenize_accumulator",
    "profiled_retokenize",
]
