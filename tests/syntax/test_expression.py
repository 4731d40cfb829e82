# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the expression tree nodes and visitor dispatch."""

import dataclasses

import pytest

from scoop.scanner.tokens import Token, TokenType
from scoop.syntax.expression import Binary, Expression, ExpressionVisitor, Grouping, Literal, Unary


class _NodeCounter(ExpressionVisitor[int]):
    """Counts the nodes in a tree."""

    def visit_binary_expression(self, expression: Binary) -> int:
        return 1 + expression.left.accept(self) + expression.right.accept(self)

    def visit_grouping_expression(self, expression: Grouping) -> int:
        return 1 + expression.expression.accept(self)

    def visit_literal_expression(self, expression: Literal) -> int:
        return 1

    def visit_unary_expression(self, expression: Unary) -> int:
        return 1 + expression.right.accept(self)


_MINUS = Token(TokenType.MINUS, "-", None, 1)


def test_accept_dispatches_to_matching_visit_method() -> None:
    tree = Binary(Unary(_MINUS, Literal(1.0)), _MINUS, Grouping(Literal(2.0)))
    assert tree.accept(_NodeCounter()) == 5


def test_expression_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Expression()  # type: ignore[abstract]


def test_visitor_must_implement_every_node() -> None:
    class _Partial(ExpressionVisitor[str]):
        def visit_literal_expression(self, expression: Literal) -> str:
            return "literal"

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_nodes_are_immutable_values() -> None:
    node = Unary(_MINUS, Literal(3.0))
    assert node == Unary(_MINUS, Literal(3.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.right = Literal(4.0)  # type: ignore[misc]
