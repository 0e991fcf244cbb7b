"""Pull-based token stream with per-call type filtering.

TokenStream wraps one scan generator and offers two ways to consume it:

- next(*ignored_types): the next token whose type is not ignored, or None
  at the end of the stream
- iteration: every remaining token, unfiltered, from the current position

Usage:
    >>> stream = TokenStream("let x", spec)
    >>> stream.next("ws")
    Token('keyword', 'let', 1:1)
    >>> [t.value for t in stream]
    [' ', 'x']

Thread Safety:
A stream is single-consumer. Do not share one across threads.

"""

from __future__ import annotations

from collections.abc import Generator
from types import TracebackType
from typing import Self

from matchlex.scanner import token_iterator
from matchlex.specification import SpecificationLike
from matchlex.tokens import Token


class TokenStream[T]:
    """A stream of tokens that can be read with the next() method.

    Construction binds a fresh scan of text; nothing is scanned until the
    first token is requested. Once exhausted or closed the stream stays at
    its end and every further read returns None.

    """

    __slots__ = ("_iterator", "_closed")

    def __init__(self, text: str, spec: SpecificationLike[T]) -> None:
        """Bind a new scan of text.

        Args:
            text: The text to be tokenized
            spec: Token specification, or a mapping / pairs to build one from
        """
        self._iterator: Generator[Token[T], None, None] = token_iterator(text, spec)
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once the stream is exhausted or closed."""
        return self._closed

    def next(self, *ignored_types: T) -> Token[T] | None:
        """Get the next token in the stream.

        Args:
            *ignored_types: Token types to skip over. May differ per call.

        Returns:
            The next token whose type is not ignored, or None if the end
            of the stream is reached.
        """
        if self._closed:
            return None
        for token in self._iterator:
            if token.type not in ignored_types:
                return token
        self._closed = True
        return None

    def close(self) -> None:
        """Close the stream, stopping the underlying scan.

        Idempotent. Afterwards next() returns None and iteration is empty.
        """
        self._closed = True
        self._iterator.close()

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Token[T]:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<TokenStream {state}>"


__all__ = ["TokenStream"]
