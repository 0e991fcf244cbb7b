"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from matchlex import Matchers


@pytest.fixture
def large_document() -> str:
    """Generate a large source-like document (~200KB, ~8k lines)."""
    lines = []
    for i in range(2000):
        lines.append(f"let value_{i} = {i * 7}.5;")
        lines.append(f'print("item {i}", value_{i});')
        lines.append("")
        lines.append(f"# comment {i}")
    return "\n".join(lines)


@pytest.fixture
def code_spec() -> dict:
    """Specification for a small C-like language."""
    return {
        "keyword": "let",
        "string": Matchers.DoubleQuotedString,
        "number": Matchers.Number,
        "name": Matchers.AlphabeticIdentifier,
        "ws": Matchers.AnyWhitespace,
        "punct": Matchers.AnyCharacter,
    }
