# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Expression tree model and its printer."""

from scoop.syntax.expression import Binary, Expression, ExpressionVisitor, Grouping, Literal, Unary
from scoop.syntax.printer import AstPrinter

__all__ = [
    "AstPrinter",
    "Binary",
    "Expression",
    "ExpressionVisitor",
    "Grouping",
    "Literal",
    "Unary",
]
