# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Scoop source text.

Converts raw source text into a sequence of tokens for subsequent parsing.
"""

from scoop.scanner.diagnostics import UNEXPECTED_CHARACTER, UNTERMINATED_STRING, DiagnosticSink, ErrorReporter
from scoop.scanner.tokens import KEYWORDS, LiteralValue, Token, TokenType

# ###############
# Public Interface
# ###############


class Scanner:
    """Single-pass scanner over one source buffer.

    Malformed input never aborts the scan. Unexpected characters and
    unterminated strings are handed to the diagnostic sink and scanning resumes
    at the next position, so the caller must inspect the sink before trusting
    the returned tokens.

    Attributes:
        reporter: The sink receiving scanning errors.
    """

    def __init__(self, source: str, reporter: DiagnosticSink | None = None) -> None:
        self.reporter: DiagnosticSink = reporter if reporter is not None else ErrorReporter()
        self._source = source
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._done = False

    def scan_tokens(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        if self._done:
            return self._tokens
        while not self._is_at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        self._done = True
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Return the current character without consuming it, or '' at end of input."""
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Return the character after the current one, or '' at end of input."""
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None, line: int | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._line if line is None else line))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one character and dispatch on it."""
        ch = self._advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch in _EQUAL_SUFFIX_TOKENS:
            single, double = _EQUAL_SUFFIX_TOKENS[ch]
            self._add_token(double if self._match("=") else single)
        elif ch == "/":
            if self._match("/"):
                # The newline is left for the next iteration so the line count stays right.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif ch in " \r\t":
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier_or_keyword()
        else:
            self.reporter.report(self._line, f"{UNEXPECTED_CHARACTER}: {ch!r}")

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal.

        Strings may span lines. Backslashes have no special meaning, so the
        literal value is the raw text between the quotes.
        """
        start_line = self._line
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self.reporter.report(self._line, f"{UNTERMINATED_STRING}.")
            return

        self._advance()  # closing "
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _scan_number(self) -> None:
        """Scan a number literal.

        A fractional part requires at least one digit after the decimal point,
        so ``123.`` scans as NUMBER followed by DOT.
        """
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()  # consume the '.'
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _scan_identifier_or_keyword(self) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        while _is_alphanumeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def tokenize(source: str, reporter: DiagnosticSink | None = None) -> list[Token]:
    """Tokenize Scoop source text into a sequence of tokens.

    Comments and whitespace are consumed and not included in the output.
    Errors are reported to ``reporter`` and do not stop the scan.

    Args:
        source: The full source text.
        reporter: Sink for scanning errors. A silent ErrorReporter is used when
            omitted.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    return Scanner(source, reporter).scan_tokens()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that take an optional trailing '=': (without, with).
_EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)
