"""Ordered token specifications.

A specification is the ordered list of (type, matcher) rules the scan
engine consults at every position. Declaration order is precedence: the
first rule that matches wins, even when a later rule would match more.

Usage:
    >>> import re
    >>> spec = TokenSpecification({"boolean": "true", "word": re.compile(r"\\w+")})
    >>> spec.types
    ('boolean', 'word')

Thread Safety:
TokenSpecification is immutable after construction.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from matchlex.errors import SpecificationError
from matchlex.matchers import Matcher, MatcherLike, as_matcher

type SpecificationLike[T] = (
    TokenSpecification[T] | Mapping[T, MatcherLike] | Iterable[tuple[T, MatcherLike]]
)


class TokenSpecification[T]:
    """Immutable, ordered sequence of (type, matcher) rules.

    Accepts a mapping (its iteration order is the declaration order) or an
    iterable of pairs. Raw values go through as_matcher(), so a plain str is
    a literal, a compiled regex is a pattern and a callable is a function.

    Raises:
        SpecificationError: If a type identifier is declared twice.
        MatcherError: If a value cannot be turned into a matcher.

    """

    __slots__ = ("_rules",)

    def __init__(
        self, rules: Mapping[T, MatcherLike] | Iterable[tuple[T, MatcherLike]] = ()
    ) -> None:
        items = rules.items() if isinstance(rules, Mapping) else rules
        seen: set[T] = set()
        built: list[tuple[T, Matcher]] = []
        for type_name, value in items:
            if type_name in seen:
                raise SpecificationError(type_name, "declared more than once")
            seen.add(type_name)
            built.append((type_name, as_matcher(value, type_name)))
        self._rules: tuple[tuple[T, Matcher], ...] = tuple(built)

    @classmethod
    def coerce(cls, spec: SpecificationLike[T]) -> TokenSpecification[T]:
        """Return spec unchanged if already built, else build it."""
        if isinstance(spec, TokenSpecification):
            return spec
        return cls(spec)

    @property
    def rules(self) -> tuple[tuple[T, Matcher], ...]:
        """Rules in declaration order."""
        return self._rules

    @property
    def types(self) -> tuple[T, ...]:
        """Declared type identifiers in order."""
        return tuple(type_name for type_name, _ in self._rules)

    def __iter__(self) -> Iterator[tuple[T, Matcher]]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, type_name: object) -> bool:
        return any(t == type_name for t, _ in self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenSpecification):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"TokenSpecification({list(self.types)!r})"


__all__ = ["SpecificationLike", "TokenSpecification"]
