#!/usr/bin/env python3
# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generate the expression tree node classes and their visitor interface.

Usage: generate_ast.py <output directory>
"""

import sys
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

EXPRESSION_TYPES: list[str] = [
    "Binary   : left: Expression, operator: Token, right: Expression",
    "Grouping : expression: Expression",
    "Literal  : value: float | str | bool | None",
    "Unary    : operator: Token, right: Expression",
]


def main(argv: list[str] | None = None) -> int:
    """Write ``expression.py`` into the directory given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: generate_ast.py <output directory>", file=sys.stderr)
        return 64

    path = Path(args[0]) / "expression.py"
    path.write_text(define_ast("Expression", EXPRESSION_TYPES), encoding="utf-8")
    print(chalk.green(f"Wrote {path}"))
    return 0


def define_ast(base_name: str, types: list[str]) -> str:
    """Return the Python source for a node hierarchy rooted at ``base_name``.

    Args:
        base_name: Name of the abstract base class, e.g. ``Expression``.
        types: Node descriptions of the form ``"Name : field: type, field: type"``.

    Returns:
        The complete module source text.
    """
    nodes = [_parse_type(description) for description in types]

    lines = [
        "# Copyright 2026 Scoop Contributors",
        "# SPDX-License-Identifier: Apache-2.0",
        "",
        f'"""{base_name} tree nodes for Scoop.',
        "",
        "Generated by tools/generate_ast.py. Do not edit by hand.",
        '"""',
        "",
        "from __future__ import annotations",
        "",
        "from abc import ABC, abstractmethod",
        "from dataclasses import dataclass",
        "from typing import Generic, TypeVar",
        "",
        "from scoop.scanner.tokens import Token",
        "",
        'R = TypeVar("R")',
        "",
        "# ###############",
        "# Public Interface",
        "# ###############",
        "",
    ]
    lines.extend(_define_visitor(base_name, [name for name, _ in nodes]))
    lines.extend(
        [
            "",
            "",
            f"class {base_name}(ABC):",
            f'    """Base class for all {base_name.lower()} nodes."""',
            "",
            "    @abstractmethod",
            f"    def accept(self, visitor: {base_name}Visitor[R]) -> R: ...",
        ]
    )
    for class_name, fields in nodes:
        lines.extend(["", ""])
        lines.extend(_define_type(base_name, class_name, fields))

    return "\n".join(lines) + "\n"


# ################
# Implementation
# ################


def _parse_type(description: str) -> tuple[str, list[str]]:
    """Split ``"Name : a: T, b: U"`` into the class name and its field declarations."""
    class_name, field_list = description.split(":", 1)
    return class_name.strip(), [field.strip() for field in field_list.split(",")]


def _visit_method(base_name: str, class_name: str) -> str:
    return f"visit_{class_name.lower()}_{base_name.lower()}"


def _define_visitor(base_name: str, class_names: list[str]) -> list[str]:
    lines = [
        "",
        f"class {base_name}Visitor(ABC, Generic[R]):",
        f'    """Visitor over every {base_name} node type."""',
    ]
    for class_name in class_names:
        lines.extend(
            [
                "",
                "    @abstractmethod",
                f"    def {_visit_method(base_name, class_name)}(self, {base_name.lower()}: {class_name}) -> R: ...",
            ]
        )
    return lines


def _define_type(base_name: str, class_name: str, fields: list[str]) -> list[str]:
    lines = [
        "@dataclass(frozen=True)",
        f"class {class_name}({base_name}):",
    ]
    lines.extend(f"    {field}" for field in fields)
    lines.extend(
        [
            "",
            f"    def accept(self, visitor: {base_name}Visitor[R]) -> R:",
            f"        return visitor.{_visit_method(base_name, class_name)}(self)",
        ]
    )
    return lines


if __name__ == "__main__":
    sys.exit(main())
