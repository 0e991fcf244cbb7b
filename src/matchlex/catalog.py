"""A collection of common token matchers.

These are ready-made Pattern matchers for building specifications, and
examples of how regular expressions are used for token matching. They are
plain data: the scan engine treats them like any other matcher.

Python's Unicode-aware \\w, \\d and \\s classes apply.

Usage:
    >>> from matchlex import Matchers, tokenize
    >>> tokenize("x = -4.5", {"num": Matchers.Number, "id": Matchers.Word})
    [Token('id', 'x', 1:1), Token('num', '-4.5', 1:5)]

"""

from __future__ import annotations

import re

from matchlex.matchers import Pattern

# Latin-1 supplement through Greek extended, plus CJK and other BMP scripts
_UNICODE_LETTER = "\\u00C0-\\u1FFF\\u2C00-\\uD7FF"


def _quoted(quote: str, flags: int = 0) -> Pattern:
    # Lazy body; the closing quote must not be preceded by a backslash.
    return Pattern.compile(f"{quote}.*?(?<!\\\\){quote}", flags)


class Matchers:
    """Namespace of pre-built matchers."""

    AlphabeticCharacter = Pattern.compile(r"[a-zA-Z]")
    AlphabeticWord = Pattern.compile(r"[a-zA-Z]+")
    AlphabeticUnicodeCharacter = Pattern.compile(f"[{_UNICODE_LETTER}a-zA-Z]")
    AlphabeticUnicodeWord = Pattern.compile(f"[{_UNICODE_LETTER}a-zA-Z]+")
    WordCharacter = Pattern.compile(r"\w")
    Word = Pattern.compile(r"\w+")
    AnyCharacter = Pattern.compile(r".", re.DOTALL)

    AlphabeticIdentifier = Pattern.compile(r"[a-zA-Z]+\w*")
    AlphabeticUnicodeIdentifier = Pattern.compile(
        f"[{_UNICODE_LETTER}a-zA-Z]+[{_UNICODE_LETTER}\\w]*"
    )

    DoubleQuotedString = _quoted('"')
    DoubleQuotedMultilineString = _quoted('"', re.DOTALL)
    SingleQuotedString = _quoted("'")
    SingleQuotedMultilineString = _quoted("'", re.DOTALL)
    BackTickedString = _quoted("`")
    BackTickedMultilineString = _quoted("`", re.DOTALL)

    Integer = Pattern.compile(r"-?\d+")
    IntegerWithUnderscores = Pattern.compile(r"-?\d+[\d_]*")
    FloatingPoint = Pattern.compile(r"-?\d+\.\d+")
    FloatingPointWithUnderscores = Pattern.compile(r"-?\d+(?:\d|_)*\.(?:\d|_)+")
    Number = Pattern.compile(r"-?\d+(?:\.\d+)?")
    NumberWithUnderscores = Pattern.compile(r"-?\d+[\d_]*(?:\.\d+[\d_]*)?")

    AnyWhitespace = Pattern.compile(r"\s")
    SingleLineWhiteSpace = Pattern.compile(r"[^\S\r\n]")
    NewLine = Pattern.compile(r"\n")

    @classmethod
    def all(cls) -> dict[str, Pattern]:
        """Return every catalog matcher keyed by name, in declaration order."""
        return {name: value for name, value in vars(cls).items() if isinstance(value, Pattern)}


__all__ = ["Matchers"]
