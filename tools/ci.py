#!/usr/bin/env python3
# Copyright 2026 MonkeyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the MonkeyLex CI checks locally.

Steps: format, lint, type check, tests with coverage, a strict tokenize pass
over the sample programs, and the package build. Pass ``--fast`` to skip the
build.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=monkeylex", "--cov-report=term-missing"]),
]

BUILD_STEP: tuple[str, list[str]] = ("Build", ["uv", "build"])


def main(argv: list[str]) -> int:
    """Run the CI steps and print a summary. Returns the process exit code."""
    steps = list(STEPS)
    steps.extend(_sample_steps())
    if "--fast" not in argv:
        steps.append(BUILD_STEP)

    results = [_run_step(name, cmd) for name, cmd in steps]

    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_SEPARATOR))
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_SEPARATOR = "=" * 60

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _sample_steps() -> list[tuple[str, list[str]]]:
    """One strict tokenize step per sample program."""
    return [
        (f"Tokenize {path.name}", ["uv", "run", "monkeylex", "tokenize", "--strict", str(path)])
        for path in sorted((_REPO_ROOT / "samples").glob("*.mk"))
    ]


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue(name))
    print(chalk.blue(_SEPARATOR))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT, stdout=subprocess.DEVNULL if name.startswith("Tokenize") else None)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
