# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model and reserved-word table for the Scoop scanner."""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Scoop scanner."""

    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # End of file
    EOF = "EOF"


LiteralValue = float | str | None


@dataclass(frozen=True)
class Token:
    """A lexical token with the line it starts on.

    Attributes:
        type: The kind of token.
        lexeme: The exact source text of the token (empty for EOF).
        literal: The decoded value: a float for NUMBER tokens, the text between
            the quotes for STRING tokens, and None for everything else.
        line: 1-based line number where the token starts.
    """

    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        literal = "nil" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)
"""Reserved words, keyed by their exact (case-sensitive) spelling."""
