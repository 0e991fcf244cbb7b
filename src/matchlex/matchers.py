"""Matcher variants for the scan engine.

A matcher decides whether the text remaining at the scan cursor starts with
a token. There are exactly three kinds:

- Literal: an exact string, matched with str.startswith
- Pattern: a compiled regular expression, anchored at offset 0
- Function: any callable from remaining text to matched prefix or None

Matchers never see text before the cursor and never raise while scanning.
A malformed matcher fails when it is built, never partway through a scan.

Usage:
    >>> from matchlex.matchers import Literal, Pattern, match_start_of_text
    >>> match_start_of_text("true story", Literal("true"))
    'true'
    >>> match_start_of_text("  x", Pattern.compile(r"\\w+")) is None
    True

Thread Safety:
All variants are frozen dataclasses. Compiled patterns are immutable.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import assert_never

from matchlex.errors import MatcherError
from matchlex.protocols import MatchFunction


@dataclass(frozen=True, slots=True)
class Literal:
    """Exact-string matcher.

    Attributes:
        text: The literal that the remaining text must start with.

    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise MatcherError(f"literal must be str, got {type(self.text).__name__}")

    def match(self, remaining: str) -> str | None:
        """Return the literal if remaining starts with it."""
        return match_start_of_text(remaining, self)


@dataclass(frozen=True, slots=True)
class Pattern:
    """Regular-expression matcher, anchored at the scan cursor.

    A match that would begin later in the remaining text does not count.
    Pattern strings are compiled eagerly so that syntax errors surface
    when the token specification is built.

    Attributes:
        regex: Compiled pattern (a pattern string is compiled on init).

    """

    regex: re.Pattern[str]

    def __post_init__(self) -> None:
        if isinstance(self.regex, str):
            object.__setattr__(self, "regex", _compile(self.regex, 0))
        elif not isinstance(self.regex, re.Pattern):
            raise MatcherError(f"expected a regular expression, got {type(self.regex).__name__}")
        elif not isinstance(self.regex.pattern, str):
            raise MatcherError("bytes patterns cannot match text")

    @classmethod
    def compile(cls, source: str, flags: int | re.RegexFlag = 0) -> Pattern:
        """Build a Pattern from a pattern string.

        Args:
            source: Regular expression source
            flags: re module flags (e.g. re.DOTALL)

        Returns:
            New Pattern matcher

        Raises:
            MatcherError: If source is not a str or not a valid expression.
        """
        return cls(_compile(source, flags))

    def match(self, remaining: str) -> str | None:
        """Return the text matched at offset 0, or None."""
        return match_start_of_text(remaining, self)


@dataclass(frozen=True, slots=True)
class Function:
    """Custom matcher backed by a callable.

    The callable's result is trusted verbatim. Returning an empty string is
    permitted; the scan engine still moves its cursor forward.

    Attributes:
        func: Callable taking remaining text, returning a prefix or None.

    """

    func: MatchFunction

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise MatcherError(f"match function must be callable, got {type(self.func).__name__}")

    def match(self, remaining: str) -> str | None:
        """Invoke the wrapped callable."""
        return match_start_of_text(remaining, self)


type Matcher = Literal | Pattern | Function
"""Closed union of the three matcher kinds."""

type MatcherLike = Matcher | str | re.Pattern[str] | MatchFunction
"""Anything as_matcher() accepts."""


def _compile(source: str, flags: int | re.RegexFlag) -> re.Pattern[str]:
    if not isinstance(source, str):
        raise MatcherError(f"pattern source must be str, got {type(source).__name__}")
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise MatcherError(f"invalid pattern {source!r}: {e}") from e


def as_matcher(value: MatcherLike, type_name: object | None = None) -> Matcher:
    """Coerce a raw specification value into a Matcher.

    - str becomes a Literal
    - compiled re.Pattern becomes a Pattern
    - any other callable becomes a Function
    - an existing Matcher is returned unchanged

    Args:
        value: Raw matcher value
        type_name: Token type the value is declared for (for error messages)

    Returns:
        A Literal, Pattern, or Function

    Raises:
        MatcherError: If the value is none of the accepted kinds.
    """
    if isinstance(value, (Literal, Pattern, Function)):
        return value
    if isinstance(value, str):
        return Literal(value)
    if isinstance(value, re.Pattern):
        if not isinstance(value.pattern, str):
            raise MatcherError("bytes patterns cannot match text", type_name)
        return Pattern(value)
    if callable(value):
        return Function(value)
    raise MatcherError(
        f"expected str, compiled pattern, or callable, got {type(value).__name__}",
        type_name,
    )


def match_start_of_text(remaining: str, matcher: Matcher) -> str | None:
    """Try a matcher against the start of remaining text.

    Args:
        remaining: Text from the scan cursor to the end of input
        matcher: Matcher to apply

    Returns:
        The matched prefix, or None if the matcher declines.
    """
    match matcher:
        case Literal(text=literal):
            return literal if remaining.startswith(literal) else None
        case Pattern(regex=regex):
            m = regex.match(remaining)
            return m.group(0) if m is not None else None
        case Function(func=func):
            return func(remaining)
        case _:
            assert_never(matcher)


__all__ = [
    "Function",
    "Literal",
    "Matcher",
    "MatcherLike",
    "Pattern",
    "as_matcher",
    "match_start_of_text",
]
