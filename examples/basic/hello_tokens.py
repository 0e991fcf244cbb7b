"""Tokenize a line of text in 3 lines, zero config, zero deps."""

from matchlex import Matchers, tokenize

for token in tokenize("x = 42", {"num": Matchers.Integer, "name": Matchers.Word, "op": "="}):
    print(token)
