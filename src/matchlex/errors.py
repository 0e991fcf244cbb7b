"""Exception classes for matchlex.

Scanning itself never raises: an unmatched character is skipped and the end
of input is signalled by exhaustion. Every error below is raised while a
token specification is being built, before any text is scanned.
"""

from __future__ import annotations


class MatchlexError(Exception):
    """Base exception for all matchlex errors.

    Subclass this for specific error categories.
    """

    pass


class MatcherError(MatchlexError):
    """A matcher could not be constructed.

    Raised for malformed regular expressions and for values that are
    neither a literal, a compiled pattern, nor a callable.
    """

    def __init__(self, message: str, type_name: object | None = None) -> None:
        """Initialize matcher error.

        Args:
            message: Description of the problem
            type_name: Token type the matcher was declared for (optional)
        """
        self.message = message
        self.type_name = type_name

        prefix = f"Matcher for {type_name!r}: " if type_name is not None else ""
        super().__init__(f"{prefix}{message}")


class SpecificationError(MatchlexError):
    """A token specification is malformed.

    Raised when the same token type is declared more than once.
    """

    def __init__(self, type_name: object, message: str) -> None:
        """Initialize specification error.

        Args:
            type_name: The offending token type
            message: Description of the problem
        """
        self.type_name = type_name
        super().__init__(f"Token type {type_name!r}: {message}")
