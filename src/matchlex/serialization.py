"""Token serialization: JSON round-trip for scanned tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching token streams to disk
- Golden-file tests of a specification
- Debugging and inspection

All output is deterministic (sorted keys). JSON round-trips need token
types that JSON can represent, typically strings.

Example:
    from matchlex import tokenize
    from matchlex.serialization import to_json, from_json

    tokens = tokenize("a b", spec)
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from matchlex.tokens import Token

_FIELDS = ("type", "value", "line", "column", "offset")


def to_dict(token: Token[Any]) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict."""
    return {
        "type": token.type,
        "value": token.value,
        "line": token.line,
        "column": token.column,
        "offset": token.offset,
    }


def from_dict(data: dict[str, Any]) -> Token[Any]:
    """Rebuild a token from a dict produced by to_dict().

    Args:
        data: Dict with type, value, line, column and optionally offset

    Returns:
        Token

    Raises:
        ValueError: If a required key is missing.
    """
    missing = [name for name in _FIELDS[:4] if name not in data]
    if missing:
        raise ValueError(f"token dict missing keys: {', '.join(missing)}")
    return Token(
        type=data["type"],
        value=data["value"],
        line=data["line"],
        column=data["column"],
        offset=data.get("offset", 0),
    )


def to_json(tokens: Iterable[Token[Any]], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON array string.

    Args:
        tokens: Tokens to serialize (any iterable, drained once)
        indent: JSON indentation (None for compact)

    Returns:
        Deterministic JSON string
    """
    return json.dumps(
        [to_dict(token) for token in tokens],
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )


def from_json(json_str: str) -> list[Token[Any]]:
    """Deserialize a JSON array string to tokens."""
    return [from_dict(item) for item in json.loads(json_str)]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
