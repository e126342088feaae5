# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model produced by the MonkeyLex scanner."""

import enum
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############

INT_MAX = 2**31 - 1

ILLEGAL_PLACEHOLDER = "<illegal>"
EOF_PLACEHOLDER = "<eof>"


class TokenType(enum.Enum):
    """All token types produced by the MonkeyLex scanner."""

    # Sentinels
    EOF = "EOF"
    ILLEGAL = "ILLEGAL"
    INT_OVERFLOW = "INT_OVERFLOW"

    # Identifiers and literals
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"

    # Operators
    ASSIGN = "="
    EQ = "=="
    NOT_EQ = "!="
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    MODULO = "%"
    POWER = "**"
    BANG = "!"
    GT = ">"
    LT = "<"
    GT_EQ = ">="
    LT_EQ = "<="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "fun"
    LET = "let"
    RETURN = "return"
    IF = "if"
    ELSE = "else"
    ELIF = "elif"
    WHILE = "while"


@dataclass(frozen=True, repr=False)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        value: The payload. Identifier text, integer value or boolean flag for
            literal tokens, the offending character for ILLEGAL, and the raw
            digit text for INT_OVERFLOW. None for every other kind.
        offset: 0-based character offset of the token's first character in
            the scanned text. Not part of equality.
    """

    type: TokenType
    value: str | int | bool | None = None
    offset: int | None = field(default=None, compare=False)

    @property
    def is_error(self) -> bool:
        """True for tokens that report malformed input."""
        return self.type in _ERROR_TYPES

    def render(self) -> str:
        """Return the source spelling of the token.

        ILLEGAL and EOF have no spelling and render as fixed placeholders.
        """
        if self.type is TokenType.EOF:
            return EOF_PLACEHOLDER
        if self.type is TokenType.ILLEGAL:
            return ILLEGAL_PLACEHOLDER
        if self.type is TokenType.BOOLEAN:
            return "true" if self.value else "false"
        if self.type in _PAYLOAD_TYPES:
            return str(self.value)
        return self.type.value

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"


# ################
# Implementation
# ################

_ERROR_TYPES = frozenset({TokenType.ILLEGAL, TokenType.INT_OVERFLOW})

_PAYLOAD_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.INT_OVERFLOW})
