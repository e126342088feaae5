# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for MonkeyLex source text.

Walks the input one character at a time and produces tokens on demand.
"""

import dataclasses
import logging
from collections.abc import Callable, Iterator

from monkeylex.lexer.keywords import lookup_keyword
from monkeylex.lexer.tokens import INT_MAX, Token, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Scanner:
    """Stateful scanner over a single source text.

    Tokens are produced lazily by ``next_token``. Once the end of input is
    reached every further call returns an EOF token. A scanner cannot be
    rewound; construct a new one to scan the same text again.

    Attributes:
        position: Offset of the character under the cursor.
        read_position: Offset of the next character to read. Always position + 1.
        ch: The character under the cursor, or None past the end of input.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self.position = 0
        self.read_position = 0
        self.ch: str | None = None
        self._read_char()

    @property
    def text(self) -> str:
        return self._text

    def next_token(self) -> Token:
        """Scan and return the next token."""
        if self.ch is None:
            return Token(TokenType.EOF, offset=self.position)

        self.skip_whitespace()
        ch = self.ch
        start = self.position
        if ch is None:
            return Token(TokenType.EOF, offset=start)

        if ch in _SINGLE_CHAR_TOKENS:
            self.advance()
            return Token(_SINGLE_CHAR_TOKENS[ch], offset=start)
        if ch in _COMPOUND_TOKENS:
            return self._scan_operator(ch, start)
        if ch.isalpha():
            return self._scan_identifier_or_keyword(start)
        if ch.isdecimal():
            return self._scan_integer(start)

        logger.warning("Illegal character %r at offset %d", ch, start)
        self.advance()
        return Token(TokenType.ILLEGAL, ch, offset=start)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def advance(self) -> None:
        """Move the cursor one character forward.

        Does nothing once the cursor has passed the end of input.
        """
        if self.ch is None:
            return
        self._read_char()

    def peek(self) -> str | None:
        """Return the character after the cursor without consuming it."""
        if self.read_position >= len(self._text):
            return None
        return self._text[self.read_position]

    def skip_whitespace(self) -> None:
        """Advance past spaces, tabs, newlines and carriage returns."""
        while self.ch is not None and self.ch in _WHITESPACE:
            self.advance()

    def _read_char(self) -> None:
        if self.read_position >= len(self._text):
            self.ch = None
        else:
            self.ch = self._text[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _read_run(self, predicate: Callable[[str], bool]) -> str:
        """Consume the maximal run of characters satisfying ``predicate``."""
        start = self.position
        while self.ch is not None and predicate(self.ch):
            self.advance()
        return self._text[start : self.position]

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _scan_operator(self, ch: str, start: int) -> Token:
        """Emit a two-character operator when the lookahead completes one."""
        second, compound, single = _COMPOUND_TOKENS[ch]
        if self.peek() == second:
            self.advance()
            self.advance()
            return Token(compound, offset=start)
        self.advance()
        return Token(single, offset=start)

    def _scan_identifier_or_keyword(self, start: int) -> Token:
        """Scan an identifier and map it to a keyword token if reserved."""
        text = self._read_run(str.isalnum)
        keyword = lookup_keyword(text)
        if keyword is not None:
            return dataclasses.replace(keyword, offset=start)
        return Token(TokenType.IDENTIFIER, text, offset=start)

    def _scan_integer(self, start: int) -> Token:
        """Scan a run of decimal digits as a signed 32-bit integer literal."""
        text = self._read_run(str.isdecimal)
        try:
            value = int(text)
        except ValueError:
            # digit runs beyond the interpreter's int conversion limit
            value = None
        if value is None or value > INT_MAX:
            logger.warning("Integer literal %s at offset %d does not fit in 32 bits", text, start)
            return Token(TokenType.INT_OVERFLOW, text, offset=start)
        return Token(TokenType.INTEGER, value, offset=start)


def tokenize(source: str) -> list[Token]:
    """Tokenize source text into a list of tokens.

    Args:
        source: The text to scan.

    Returns:
        A list of Token objects ending with a single EOF token. Malformed input
        shows up as ILLEGAL or INT_OVERFLOW tokens; this function never raises.
    """
    return list(Scanner(source))


# ################
# Implementation
# ################

_WHITESPACE = frozenset(" \t\n\r")

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "%": TokenType.MODULO,
}

# first character -> (completing character, compound type, single type)
_COMPOUND_TOKENS: dict[str, tuple[str, TokenType, TokenType]] = {
    "=": ("=", TokenType.EQ, TokenType.ASSIGN),
    "*": ("*", TokenType.POWER, TokenType.ASTERISK),
    ">": ("=", TokenType.GT_EQ, TokenType.GT),
    "<": ("=", TokenType.LT_EQ, TokenType.LT),
    "!": ("=", TokenType.NOT_EQ, TokenType.BANG),
}
