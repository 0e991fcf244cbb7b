"""matchlex ScanAccumulator: opt-in profiling for scans.

Records, across every scan started inside the profiled context:
- number of scans and total source length
- tokens emitted and characters skipped
- zero-length matches that were forced forward
- total cursor advance

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from matchlex import tokenize
    from matchlex.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokenize("a b", spec)

    print(metrics.summary())
    # {"total_ms": 0.1, "scan_calls": 1, "token_count": 3, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of scans started.
        source_length: Combined length of scanned texts.
        token_count: Tokens emitted.
        skipped_chars: Characters no matcher accepted.
        zero_length_matches: Matches of length 0 (cursor forced forward by 1).
        advanced_chars: Sum of all cursor advances. Equals source_length
            when every scan was drained to the end.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    skipped_chars: int = 0
    zero_length_matches: int = 0
    advanced_chars: int = 0

    def record_scan(self, source_length: int) -> None:
        """Record the start of a scan."""
        self.scan_calls += 1
        self.source_length += source_length

    def record_token(self, advance: int, *, zero_length: bool = False) -> None:
        """Record an emitted token and the cursor advance it caused."""
        self.token_count += 1
        self.advanced_chars += advance
        if zero_length:
            self.zero_length_matches += 1

    def record_skip(self) -> None:
        """Record one unmatched character."""
        self.skipped_chars += 1
        self.advanced_chars += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "skipped_chars": self.skipped_chars,
            "zero_length_matches": self.zero_length_matches,
            "advanced_chars": self.advanced_chars,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block. Scans
    started inside the block keep reporting to it until they finish.

    Yields:
        ScanAccumulator populated by scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
