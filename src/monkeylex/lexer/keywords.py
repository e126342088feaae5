# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reserved words of the MonkeyLex language."""

from collections.abc import Mapping
from types import MappingProxyType

from monkeylex.lexer.tokens import Token, TokenType

# ###############
# Public Interface
# ###############

KEYWORDS: Mapping[str, Token] = MappingProxyType(
    {
        "fun": Token(TokenType.FUNCTION),
        "let": Token(TokenType.LET),
        "return": Token(TokenType.RETURN),
        "true": Token(TokenType.BOOLEAN, True),
        "false": Token(TokenType.BOOLEAN, False),
        "if": Token(TokenType.IF),
        "else": Token(TokenType.ELSE),
        "elif": Token(TokenType.ELIF),
        "while": Token(TokenType.WHILE),
    }
)


def lookup_keyword(text: str) -> Token | None:
    """Return the reserved token spelled exactly as ``text``, or None.

    Matching is case-sensitive; prefixes and extensions of a keyword are not keywords.
    """
    return KEYWORDS.get(text)
