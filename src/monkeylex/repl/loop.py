# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Interactive loop that prints the token stream of each input unit."""

import logging
from typing import TextIO

from yachalk import chalk

from monkeylex.config import ReplConfig
from monkeylex.lexer.scanner import Scanner
from monkeylex.lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONTINUATION_PROMPT = ".. "


def run_repl(stdin: TextIO, stdout: TextIO, config: ReplConfig | None = None) -> int:
    """Read source from ``stdin`` and print its tokens to ``stdout``.

    In ``line`` mode every line is scanned by its own Scanner, so nothing
    carries over between lines. In ``buffer`` mode lines are collected until
    a blank line or end of input and the whole unit is scanned at once.

    Args:
        stdin: Stream to read source lines from. The loop ends at end of stream.
        stdout: Stream the token representations are written to.
        config: Loop settings. Defaults are used when omitted.

    Returns:
        The number of error tokens printed during the session.
    """
    if config is None:
        config = ReplConfig()
    if config.mode == "buffer":
        return _run_buffered(stdin, stdout, config)
    return _run_line_by_line(stdin, stdout, config)


def print_tokens(source: str, stdout: TextIO, color: bool = False) -> int:
    """Scan ``source`` to exhaustion and print every token before EOF.

    Returns:
        The number of error tokens printed.
    """
    errors = 0
    for token in Scanner(source):
        if token.type is TokenType.EOF:
            break
        if token.is_error:
            errors += 1
        print(format_token(token, color), file=stdout)
    return errors


def format_token(token: Token, color: bool = False) -> str:
    """Return the debug representation of a token, red when it is an error."""
    text = repr(token)
    if color and token.is_error:
        return chalk.red(text)
    return text


# ################
# Implementation
# ################


def _read_line(stdin: TextIO, stdout: TextIO, prompt: str) -> str:
    """Write the prompt and read one line; returns '' at end of input."""
    if prompt:
        stdout.write(prompt)
        stdout.flush()
    return stdin.readline()


def _run_line_by_line(stdin: TextIO, stdout: TextIO, config: ReplConfig) -> int:
    errors = 0
    while True:
        line = _read_line(stdin, stdout, config.prompt)
        if not line:
            break
        errors += print_tokens(line, stdout, config.color)
    logger.debug("Input exhausted after %d error token(s)", errors)
    return errors


def _run_buffered(stdin: TextIO, stdout: TextIO, config: ReplConfig) -> int:
    errors = 0
    buffer: list[str] = []
    while True:
        prompt = CONTINUATION_PROMPT if buffer and config.prompt else config.prompt
        line = _read_line(stdin, stdout, prompt)
        if not line or not line.strip():
            if buffer:
                errors += print_tokens("".join(buffer), stdout, config.color)
                buffer.clear()
            if not line:
                break
            continue
        buffer.append(line)
    logger.debug("Input exhausted after %d error token(s)", errors)
    return errors
