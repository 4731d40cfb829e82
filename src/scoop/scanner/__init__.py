# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and token model for Scoop source text."""

from scoop.scanner.diagnostics import (
    UNEXPECTED_CHARACTER,
    UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSink,
    ErrorReporter,
)
from scoop.scanner.lexer import Scanner, tokenize
from scoop.scanner.tokens import KEYWORDS, Token, TokenType

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "ErrorReporter",
    "KEYWORDS",
    "Scanner",
    "Token",
    "TokenType",
    "UNEXPECTED_CHARACTER",
    "UNTERMINATED_STRING",
    "tokenize",
]
