"""Source position tracking for tokens.

Converts absolute character offsets into 1-based (line, column) pairs.
A line ends after each "\\n"; the column restarts at 1 on the next
character. No other character is treated as a line break.

Two equivalent implementations are provided:

- line_and_column(): pure, recomputes from the start of the text
- PositionTracker: keeps running state for non-decreasing offsets

Thread Safety:
line_and_column() and SourceLocation are safe to share across threads.
PositionTracker is single-owner mutable state.

"""

from __future__ import annotations

from dataclasses import dataclass


def line_and_column(text: str, index: int) -> tuple[int, int]:
    """Compute the 1-based (line, column) of an offset.

    Args:
        text: The full source text
        index: Absolute offset, 0 <= index <= len(text)

    Returns:
        (line, column) of the character at index

    Raises:
        ValueError: If index is outside the text.

    Example:
        >>> line_and_column("a\\nb", 2)
        (2, 1)
    """
    if index < 0 or index > len(text):
        raise ValueError(f"offset {index} outside text of length {len(text)}")
    newlines = text.count("\n", 0, index)
    if newlines == 0:
        return 1, index + 1
    last_nl = text.rfind("\n", 0, index)
    return newlines + 1, index - last_nl


class PositionTracker:
    """Incremental (line, column) tracking over one text.

    Produces exactly what line_and_column() would for the same offsets, but
    only scans the characters between the previous offset and the new one.
    Offsets must be requested in non-decreasing order.

    Usage:
        >>> tracker = PositionTracker("ab\\ncd")
        >>> tracker.advance_to(1)
        (1, 2)
        >>> tracker.advance_to(4)
        (2, 2)

    """

    __slots__ = ("_text", "_offset", "_line", "_column")

    def __init__(self, text: str) -> None:
        self._text = text
        self._offset = 0
        self._line = 1
        self._column = 1

    @property
    def offset(self) -> int:
        """Offset of the last position returned."""
        return self._offset

    def advance_to(self, index: int) -> tuple[int, int]:
        """Move to index and return its (line, column).

        Args:
            index: Absolute offset, not before the current one

        Returns:
            (line, column) of the character at index

        Raises:
            ValueError: If index moves backwards or leaves the text.
        """
        if index < self._offset:
            raise ValueError(f"cannot move back from offset {self._offset} to {index}")
        if index > len(self._text):
            raise ValueError(f"offset {index} outside text of length {len(self._text)}")

        # Count newlines in skipped segment using C-optimized str.count
        newlines = self._text.count("\n", self._offset, index)
        if newlines > 0:
            last_nl = self._text.rfind("\n", self._offset, index)
            self._line += newlines
            self._column = index - last_nl
        else:
            self._column += index - self._offset
        self._offset = index
        return self._line, self._column


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of a token in its source, for diagnostics.

    All line and column numbers are 1-indexed.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        offset: Absolute start offset in the source
        end_offset: Absolute end offset (exclusive)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=7)
        >>> str(loc)
        '3:7'
        >>> str(SourceLocation(1, 1, source_file="query.sql"))
        'query.sql:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's end offset
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            source_file=self.source_file,
        )


__all__ = ["PositionTracker", "SourceLocation", "line_and_column"]
