#!/usr/bin/env python3
# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the Scoop CI checks locally.

Checks that the generated expression module is current, then runs format,
lint, type check, tests with coverage, and a package build.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

from generate_ast import EXPRESSION_TYPES, define_ast

# ###############
# Public Interface
# ###############

REPO_ROOT = Path(__file__).resolve().parent.parent
EXPRESSION_MODULE = REPO_ROOT / "src" / "scoop" / "syntax" / "expression.py"

COMMANDS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=scoop", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every CI step, print a summary, and return the process exit code."""
    results: list[tuple[str, bool, float]] = []

    _banner("Generated code")
    start = time.monotonic()
    results.append(("Generated code", _expression_module_is_current(), time.monotonic() - start))

    for name, cmd in COMMANDS:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title)}\n{sep}")


def _expression_module_is_current() -> bool:
    """Compare the checked-in expression module against fresh generator output."""
    expected = define_ast("Expression", EXPRESSION_TYPES)
    if EXPRESSION_MODULE.read_text(encoding="utf-8") == expected:
        print("expression.py matches tools/generate_ast.py")
        return True
    print(
        "expression.py is stale. Run 'uv run tools/generate_ast.py src/scoop/syntax'.",
        file=sys.stderr,
    )
    return False


if __name__ == "__main__":
    sys.exit(main())
