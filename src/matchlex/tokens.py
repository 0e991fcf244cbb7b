"""Token definition for the matchlex scanner.

Each Token carries the type identifier of the matcher that produced it, the
exact matched text, and the 1-based line and column of its first character.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matchlex.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Token[T]:
    """A token produced by the scan engine.

    Two tokens are equal when type, value, line and column are equal; the
    absolute offset is informational and excluded from comparison.

    Attributes:
        type: Identifier the matching rule was declared under
        value: The matched substring, verbatim
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        offset: Absolute start offset in the source (0-indexed)

    """

    type: T
    value: str
    line: int
    column: int
    offset: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type!r}, {val!r}, {self.line}:{self.column})"

    @property
    def end_offset(self) -> int:
        """Absolute offset just past the token."""
        return self.offset + len(self.value)

    @property
    def location(self) -> SourceLocation:
        """Source location spanning this token."""
        return self.locate()

    def locate(self, source_file: str | None = None) -> SourceLocation:
        """Source location spanning this token, optionally naming its file.

        Example:
            >>> str(Token("w", "ab", 3, 7).locate("query.sql"))
            'query.sql:3:7'
        """
        from matchlex.location import SourceLocation

        return SourceLocation(
            lineno=self.line,
            col_offset=self.column,
            offset=self.offset,
            end_offset=self.end_offset,
            source_file=source_file,
        )
