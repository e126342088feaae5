# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the MonkeyLex command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from monkeylex.config import ConfigError, ReplConfig, find_config, load_config
from monkeylex.lexer.scanner import Scanner
from monkeylex.repl.loop import format_token, run_repl

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the MonkeyLex CLI."""
    parser = argparse.ArgumentParser(
        prog="monkeylex",
        description="MonkeyLex - lexical scanner for a small C-like scripting language",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=None,
        help="Diagnostic log level (default: from config, else WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # repl subcommand
    repl_parser = subparsers.add_parser(
        "repl",
        help="Print the tokens of each line typed on standard input",
        description="Read source text from standard input and print its token stream.",
    )
    repl_parser.add_argument(
        "--mode",
        choices=["line", "buffer"],
        default=None,
        help="'line' scans each line separately; 'buffer' scans blank-line separated blocks",
    )
    repl_parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt written before each line (default: '>> ')",
    )
    repl_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not highlight error tokens",
    )
    repl_parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML configuration file (default: ./.monkeylex.yaml if present)",
    )
    repl_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with code 1 if the session produced illegal characters or oversized integers",
    )

    # tokenize subcommand
    tokenize_parser = subparsers.add_parser(
        "tokenize",
        help="Print the tokens of a source file",
        description="Scan a source file and print one token per line, ending with EOF.",
    )
    tokenize_parser.add_argument("file", help="Source file to scan")
    tokenize_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with code 1 if the file contains illegal characters or oversized integers",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "repl":
        return _cmd_repl(args)
    if args.command == "tokenize":
        return _cmd_tokenize(args)
    return 0


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr, force=True)


def _cmd_repl(args: argparse.Namespace) -> int:
    """Handle the repl subcommand."""
    config_path = Path(args.config) if args.config else find_config(Path.cwd())
    config = ReplConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    overrides: dict[str, object] = {}
    if args.mode is not None:
        overrides["mode"] = args.mode
    if args.prompt is not None:
        overrides["prompt"] = args.prompt
    if args.no_color:
        overrides["color"] = False
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    try:
        config = config.with_overrides(**overrides)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _configure_logging(config.log_level)
    errors = run_repl(sys.stdin, sys.stdout, config)
    if args.strict and errors:
        print(f"Error: {errors} malformed token(s) in the session.", file=sys.stderr)
        return 1
    return 0


def _cmd_tokenize(args: argparse.Namespace) -> int:
    """Handle the tokenize subcommand."""
    _configure_logging(args.log_level or "WARNING")
    path = Path(args.file)

    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    errors = 0
    for token in Scanner(source):
        if token.is_error:
            errors += 1
        print(format_token(token))

    if args.strict and errors:
        print(f"Error: {errors} malformed token(s) in '{path}'.", file=sys.stderr)
        return 1
    return 0
