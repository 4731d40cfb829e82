# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Expression tree nodes for Scoop.

Generated by tools/generate_ast.py. Do not edit by hand.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from scoop.scanner.tokens import Token

R = TypeVar("R")

# ###############
# Public Interface
# ###############


class ExpressionVisitor(ABC, Generic[R]):
    """Visitor over every Expression node type."""

    @abstractmethod
    def visit_binary_expression(self, expression: Binary) -> R: ...

    @abstractmethod
    def visit_grouping_expression(self, expression: Grouping) -> R: ...

    @abstractmethod
    def visit_literal_expression(self, expression: Literal) -> R: ...

    @abstractmethod
    def visit_unary_expression(self, expression: Unary) -> R: ...


class Expression(ABC):
    """Base class for all expression nodes."""

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor[R]) -> R: ...


@dataclass(frozen=True)
class Binary(Expression):
    left: Expression
    operator: Token
    right: Expression

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_binary_expression(self)


@dataclass(frozen=True)
class Grouping(Expression):
    expression: Expression

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_grouping_expression(self)


@dataclass(frozen=True)
class Literal(Expression):
    value: float | str | bool | None

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_literal_expression(self)


@dataclass(frozen=True)
class Unary(Expression):
    operator: Token
    right: Expression

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_unary_expression(self)
