"""Protocols for matchlex.

Defines the contract for custom matcher functions.
"""

from __future__ import annotations

from typing import Protocol


class MatchFunction(Protocol):
    """Protocol for callables used as custom matchers.

    The callable receives the text remaining from the scan cursor and
    returns the matched prefix, or None when it does not match. It must be
    pure: no state, no lookbehind into already scanned text.

    Thread Safety:
        Implementations must be stateless or use only local variables.

    """

    def __call__(self, text: str) -> str | None:
        """Match a prefix of text.

        Args:
            text: Remaining text from the current scan position

        Returns:
            The matched prefix, or None for no match
        """
        ...
