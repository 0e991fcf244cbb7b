"""Tests for TokenStream: filtered next(), close(), and iteration."""

import re
from typing import get_type_hints

import pytest

from matchlex import Matchers, Token, TokenStream

SPEC = {
    "keyword": "let",
    "name": re.compile(r"[a-z]+"),
    "number": Matchers.Integer,
    "ws": Matchers.AnyWhitespace,
    "punct": Matchers.AnyCharacter,
}


@pytest.fixture
def stream() -> TokenStream[str]:
    return TokenStream("let x = 1;\nlet y = 2;", SPEC)


class TestNext:
    """next() with and without ignored types."""

    def test_next_without_filter(self, stream: TokenStream[str]) -> None:
        assert stream.next() == Token("keyword", "let", 1, 1)
        assert stream.next() == Token("ws", " ", 1, 4)

    def test_ignored_types_skipped(self, stream: TokenStream[str]) -> None:
        values = []
        while (token := stream.next("ws", "punct")) is not None:
            values.append(token.value)
        assert values == ["let", "x", "1", "let", "y", "2"]

    def test_filter_can_change_per_call(self, stream: TokenStream[str]) -> None:
        assert stream.next("keyword") == Token("ws", " ", 1, 4)
        assert stream.next("ws") == Token("name", "x", 1, 5)
        assert stream.next() == Token("ws", " ", 1, 6)

    def test_relative_order_preserved(self) -> None:
        spec = {"letter": Matchers.AlphabeticCharacter, "digit": Matchers.Integer}
        tokens = TokenStream("a1b2", spec)
        assert [tokens.next("digit"), tokens.next("digit")] == [
            Token("letter", "a", 1, 1),
            Token("letter", "b", 1, 3),
        ]

    def test_returns_none_at_end_repeatedly(self) -> None:
        tokens = TokenStream("a", {"a": "a"})
        assert tokens.next() == Token("a", "a", 1, 1)
        assert tokens.next() is None
        assert tokens.next() is None
        assert tokens.closed

    def test_all_ignored_reaches_end(self, stream: TokenStream[str]) -> None:
        assert stream.next("keyword", "name", "number", "ws", "punct") is None
        assert stream.next() is None

    def test_empty_text(self) -> None:
        assert TokenStream("", SPEC).next() is None


class TestLaziness:
    def test_construction_scans_nothing(self) -> None:
        calls: list[str] = []

        def spy(text: str) -> str | None:
            calls.append(text)
            return None

        TokenStream("abc", {"spy": spy})
        assert calls == []


class TestClose:
    """close() ends the stream for good."""

    def test_close_then_next_returns_none(self, stream: TokenStream[str]) -> None:
        stream.next()
        stream.close()
        assert stream.closed
        assert stream.next() is None
        assert stream.next("ws") is None

    def test_close_before_first_read(self, stream: TokenStream[str]) -> None:
        stream.close()
        assert stream.closed
        assert stream.next() is None

    def test_close_is_idempotent(self, stream: TokenStream[str]) -> None:
        stream.close()
        stream.close()
        assert stream.next() is None

    def test_iteration_after_close_is_empty(self, stream: TokenStream[str]) -> None:
        stream.close()
        assert list(stream) == []

    def test_context_manager_closes(self) -> None:
        with TokenStream("a b", SPEC) as tokens:
            assert tokens.next() is not None
        assert tokens.closed
        assert tokens.next() is None

    def test_repr_reflects_state(self, stream: TokenStream[str]) -> None:
        assert repr(stream) == "<TokenStream open>"
        stream.close()
        assert repr(stream) == "<TokenStream closed>"

    def test_close_returns_nothing(self) -> None:
        """The scan generator has no return value to hand back."""
        assert get_type_hints(TokenStream.close)["return"] is type(None)


class TestIteration:
    """Iteration yields the remaining tokens, unfiltered."""

    def test_iterates_all_tokens(self) -> None:
        tokens = TokenStream("ab", {"char": Matchers.AnyCharacter})
        assert [t.value for t in tokens] == ["a", "b"]

    def test_iteration_continues_from_current_position(self, stream: TokenStream[str]) -> None:
        stream.next("ws")
        stream.next("ws")
        rest = [t.value for t in stream]
        assert rest[:3] == [" ", "=", " "]

    def test_iteration_bypasses_filter(self) -> None:
        tokens = TokenStream("a b", SPEC)
        assert [t.type for t in tokens] == ["name", "ws", "name"]

    def test_break_does_not_close(self) -> None:
        tokens = TokenStream("abc", {"char": Matchers.AnyCharacter})
        for token in tokens:
            assert token.value == "a"
            break
        assert not tokens.closed
        assert tokens.next() == Token("char", "b", 1, 2)

    def test_forward_only(self) -> None:
        tokens = TokenStream("ab", {"char": Matchers.AnyCharacter})
        assert len(list(tokens)) == 2
        assert list(tokens) == []

    def test_builtin_next(self) -> None:
        tokens = TokenStream("a", {"char": Matchers.AnyCharacter})
        assert next(tokens) == Token("char", "a", 1, 1)
        with pytest.raises(StopIteration):
            next(tokens)
