"""Error-path tests.

Construction-time errors surface before any scanning; scanning itself
never raises for unmatched input.
"""

import re
from collections.abc import Callable

import pytest

from matchlex import (
    Function,
    Literal,
    Matchers,
    MatcherError,
    MatchlexError,
    Pattern,
    SpecificationError,
    TokenStream,
    token_iterator,
    tokenize,
)

# =========================================================================
# Exception formatting and hierarchy
# =========================================================================


class TestMatcherError:
    def test_message_only(self) -> None:
        err = MatcherError("bad pattern")
        assert str(err) == "bad pattern"
        assert err.type_name is None

    def test_with_type_name(self) -> None:
        err = MatcherError("bad pattern", "number")
        assert str(err) == "Matcher for 'number': bad pattern"

    def test_is_matchlex_error(self) -> None:
        assert isinstance(MatcherError("x"), MatchlexError)


class TestSpecificationError:
    def test_format(self) -> None:
        err = SpecificationError("word", "declared more than once")
        assert str(err) == "Token type 'word': declared more than once"

    def test_is_matchlex_error(self) -> None:
        assert isinstance(SpecificationError("x", "y"), MatchlexError)


# =========================================================================
# Construction-time failures
# =========================================================================


class TestConstructionTimeFailures:
    def test_token_iterator_validates_eagerly(self) -> None:
        """A bad specification fails when the iterator is created, not pulled."""
        with pytest.raises(MatcherError):
            token_iterator("abc", {"bad": object()})  # type: ignore[dict-item]

    def test_stream_validates_eagerly(self) -> None:
        with pytest.raises(SpecificationError):
            TokenStream("abc", [("a", "a"), ("a", "b")])

    def test_malformed_regex_source(self) -> None:
        with pytest.raises(MatcherError, match="invalid pattern"):
            tokenize("abc", {"bad": Pattern.compile("*a")})

    def test_bytes_pattern_source_rejected(self) -> None:
        """A bytes source would otherwise only fail on the first pull."""
        with pytest.raises(MatcherError, match="must be str"):
            Pattern.compile(b"a")  # type: ignore[arg-type]

    def test_compiled_bytes_pattern_rejected_by_constructor(self) -> None:
        with pytest.raises(MatcherError, match="bytes"):
            Pattern(re.compile(b"a"))  # type: ignore[arg-type]

    def test_non_str_literal_rejected(self) -> None:
        with pytest.raises(MatcherError, match="literal must be str"):
            Literal(5)  # type: ignore[arg-type]

    def test_non_callable_function_rejected(self) -> None:
        with pytest.raises(MatcherError, match="must be callable"):
            Function("x")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "build",
        [
            lambda: Literal(5),
            lambda: Function("x"),
            lambda: Pattern.compile(b"a"),
        ],
        ids=["literal", "function", "bytes-pattern"],
    )
    def test_never_fails_mid_scan(self, build: Callable[[], object]) -> None:
        """Malformed matchers fail before a specification can hold them."""
        with pytest.raises(MatcherError):
            token_iterator("abc", {"t": build()})  # type: ignore[dict-item]


# =========================================================================
# Scanning never raises for unmatched input
# =========================================================================


class TestSilentScanning:
    @pytest.mark.parametrize("text", ["", "\x00", "\n\n\n", "😀 emoji", "\r\n"])
    def test_unmatched_input_is_silent(self, text: str) -> None:
        assert tokenize(text, {"digit": re.compile(r"\d")}) == []

    def test_function_exceptions_propagate(self) -> None:
        """Errors raised by user functions are not swallowed."""

        def broken(text: str) -> str | None:
            raise KeyError(text)

        with pytest.raises(KeyError):
            tokenize("a", {"broken": broken})

    def test_astral_characters_count_as_one_column(self) -> None:
        tokens = tokenize("a😀b", {"any": Matchers.AnyCharacter})
        assert [t.column for t in tokens] == [1, 2, 3]
