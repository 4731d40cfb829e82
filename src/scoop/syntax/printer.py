# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parenthesized, Lisp-style rendering of expression trees."""

from scoop.syntax.expression import Binary, Expression, ExpressionVisitor, Grouping, Literal, Unary

# ###############
# Public Interface
# ###############


class AstPrinter(ExpressionVisitor[str]):
    """Render an expression tree so its nesting is explicit.

    ``-123 * (45.67)`` prints as ``(* (- 123.0) (group 45.67))``.
    """

    def print(self, expression: Expression) -> str:
        return expression.accept(self)

    def visit_binary_expression(self, expression: Binary) -> str:
        return self._parenthesize(expression.operator.lexeme, expression.left, expression.right)

    def visit_grouping_expression(self, expression: Grouping) -> str:
        return self._parenthesize("group", expression.expression)

    def visit_literal_expression(self, expression: Literal) -> str:
        if expression.value is None:
            return "nil"
        if isinstance(expression.value, bool):
            return "true" if expression.value else "false"
        return str(expression.value)

    def visit_unary_expression(self, expression: Unary) -> str:
        return self._parenthesize(expression.operator.lexeme, expression.right)

    # ################
    # Implementation
    # ################

    def _parenthesize(self, name: str, *expressions: Expression) -> str:
        parts = [name, *(expression.accept(self) for expression in expressions)]
        return f"({' '.join(parts)})"
