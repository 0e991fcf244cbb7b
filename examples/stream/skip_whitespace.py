"""Pull tokens one at a time, ignoring whitespace and comments.

A tiny INI-style reader: the caller decides per read which token types to
skip, and stops early by closing the stream.
"""

import re

from matchlex import Matchers, TokenStream

SOURCE = """\
; settings
[server]
host = "example.org"
port = 8080
"""

SPEC = {
    "comment": re.compile(r";[^\n]*"),
    "section": re.compile(r"\[[^\]\n]+\]"),
    "string": Matchers.DoubleQuotedString,
    "number": Matchers.Integer,
    "key": Matchers.AlphabeticIdentifier,
    "equals": "=",
    "ws": Matchers.AnyWhitespace,
}

with TokenStream(SOURCE, SPEC) as stream:
    section = None
    while (token := stream.next("ws", "comment")) is not None:
        if token.type == "section":
            section = token.value[1:-1]
        elif token.type == "key":
            stream.next("ws")  # "="
            value = stream.next("ws")
            print(f"{section}.{token.value} = {value.value if value else None}")
