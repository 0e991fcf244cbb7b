"""
matchlex: First-Match-Wins Lexical Scanner for Python

Turns text into a lazy stream of typed tokens from an ordered table of
matchers. Each matcher is a literal string, a regular expression anchored at
the scan position, or a function. At every position the first declared
matcher that matches wins; characters no matcher accepts are skipped.
Zero runtime dependencies.

Quick Start:
    >>> import re
    >>> from matchlex import tokenize
    >>> spec = {"boolean": "true", "word": re.compile(r"\\w+"), "ws": re.compile(r"\\s+")}
    >>> tokenize("true story", spec)
    [Token('boolean', 'true', 1:1), Token('ws', ' ', 1:5), Token('word', 'story', 1:6)]

    >>> # Pull tokens one at a time, skipping whitespace
    >>> from matchlex import TokenStream
    >>> stream = TokenStream("true story", spec)
    >>> stream.next("ws")
    Token('boolean', 'true', 1:1)
    >>> stream.next("ws")
    Token('word', 'story', 1:6)
    >>> stream.next("ws") is None
    True

Installation:
    pip install matchlex
"""

from matchlex.catalog import Matchers
from matchlex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from matchlex.errors import MatcherError, MatchlexError, SpecificationError
from matchlex.location import PositionTracker, SourceLocation, line_and_column
from matchlex.matchers import (
    Function,
    Literal,
    Matcher,
    Pattern,
    as_matcher,
    match_start_of_text,
)
from matchlex.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from matchlex.protocols import MatchFunction
from matchlex.scanner import token_iterator, tokenize
from matchlex.serialization import from_dict, from_json, to_dict, to_json
from matchlex.specification import TokenSpecification
from matchlex.stream import TokenStream
from matchlex.tokens import Token

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "token_iterator",
    "tokenize",
    "TokenStream",
    # Data model
    "Token",
    "TokenSpecification",
    # Matchers
    "Matcher",
    "Literal",
    "Pattern",
    "Function",
    "MatchFunction",
    "as_matcher",
    "match_start_of_text",
    "Matchers",
    # Positions
    "line_and_column",
    "PositionTracker",
    "SourceLocation",
    # Errors
    "MatchlexError",
    "MatcherError",
    "SpecificationError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "profiled_scan",
    "get_scan_accumulator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
