# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model, keyword table and scanner for MonkeyLex source text."""

from monkeylex.lexer.keywords import KEYWORDS, lookup_keyword
from monkeylex.lexer.scanner import Scanner, tokenize
from monkeylex.lexer.tokens import INT_MAX, Token, TokenType

__all__ = [
    "INT_MAX",
    "KEYWORDS",
    "Scanner",
    "Token",
    "TokenType",
    "lookup_keyword",
    "tokenize",
]
