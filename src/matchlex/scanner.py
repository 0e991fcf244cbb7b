"""First-match-wins scan engine.

At each cursor position the rules of the specification are tried in
declaration order. The first rule that matches produces a token and the
cursor moves past the matched text. When no rule matches, the character
under the cursor is dropped and the cursor moves on by one. The scan ends
at the end of the text; no EOF token is produced.

Tokens are produced lazily: the engine does no work until the consumer
asks for the next token.

Usage:
    >>> import re
    >>> spec = {"ws": re.compile(r"\\s+"), "word": re.compile(r"[a-z]+")}
    >>> tokenize("a b", spec)
    [Token('word', 'a', 1:1), Token('ws', ' ', 1:2), Token('word', 'b', 1:3)]

Thread Safety:
Each call returns an independent generator. The text and specification
are read-only; the generator itself is single-consumer.

"""

from __future__ import annotations

from collections.abc import Generator

from matchlex.config import get_scan_config
from matchlex.location import PositionTracker, line_and_column
from matchlex.matchers import Matcher, match_start_of_text
from matchlex.profiling import ScanAccumulator, get_scan_accumulator
from matchlex.specification import SpecificationLike, TokenSpecification
from matchlex.tokens import Token
from matchlex.utils.logger import get_logger

logger = get_logger(__name__)


def token_iterator[T](
    text: str, spec: SpecificationLike[T]
) -> Generator[Token[T], None, None]:
    """Create a generator over the tokens of text.

    The specification is built (and validated) immediately, and the active
    ScanConfig and profiling accumulator are captured here. Scanning only
    starts when the first token is requested.

    Args:
        text: The text to be tokenized
        spec: Token specification, or a mapping / pairs to build one from

    Returns:
        Generator yielding Token objects in source order

    Raises:
        SpecificationError: If a token type is declared twice.
        MatcherError: If a matcher value is malformed.
    """
    rules = TokenSpecification.coerce(spec).rules
    config = get_scan_config()
    return _scan(
        text,
        rules,
        incremental=config.incremental_positions,
        log_skipped=config.log_skipped,
        acc=get_scan_accumulator(),
    )


def tokenize[T](text: str, spec: SpecificationLike[T]) -> list[Token[T]]:
    """Scan the whole text and collect the tokens into a list.

    Args:
        text: The text to be tokenized
        spec: Token specification, or a mapping / pairs to build one from

    Returns:
        All tokens, in source order
    """
    return list(token_iterator(text, spec))


def _scan[T](
    text: str,
    rules: tuple[tuple[T, Matcher], ...],
    *,
    incremental: bool,
    log_skipped: bool,
    acc: ScanAccumulator | None,
) -> Generator[Token[T], None, None]:
    """Generator body of token_iterator().

    Complexity: O(n * r) matcher calls for n characters and r rules, plus
    the cost of slicing the remaining text once per position.
    """
    text_len = len(text)
    tracker = PositionTracker(text) if incremental else None
    if acc is not None:
        acc.record_scan(text_len)

    pos = 0
    while pos < text_len:
        remaining = text[pos:]
        for type_name, matcher in rules:
            value = match_start_of_text(remaining, matcher)
            if value is None:
                continue

            if tracker is not None:
                line, column = tracker.advance_to(pos)
            else:
                line, column = line_and_column(text, pos)

            # Zero-length matches still emit, but the cursor must move.
            advance = len(value)
            if advance == 0:
                logger.debug(
                    "Zero-length match for %r at %d:%d; advancing 1", type_name, line, column
                )
                advance = 1
            if acc is not None:
                acc.record_token(advance, zero_length=not value)

            yield Token(type=type_name, value=value, line=line, column=column, offset=pos)
            pos += advance
            break
        else:
            if log_skipped:
                logger.debug("No matcher accepted %r at offset %d; skipped", text[pos], pos)
            if acc is not None:
                acc.record_skip()
            pos += 1


__all__ = ["token_iterator", "tokenize"]
