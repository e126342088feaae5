# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Interactive token printer."""

from monkeylex.repl.loop import format_token, print_tokens, run_repl

__all__ = [
    "format_token",
    "print_tokens",
    "run_repl",
]
