# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for scanner diagnostics."""

import io

from scoop.scanner.diagnostics import Diagnostic, ErrorReporter
from scoop.scanner.lexer import tokenize


class _ListSink:
    """Minimal sink satisfying the DiagnosticSink protocol."""

    def __init__(self) -> None:
        self.reports: list[tuple[int, str]] = []

    def report(self, line: int, message: str) -> None:
        self.reports.append((line, message))


def test_diagnostic_str_format() -> None:
    assert str(Diagnostic(line=7, message="Unterminated string.")) == "[line 7] Error: Unterminated string."


def test_reporter_starts_clean() -> None:
    reporter = ErrorReporter()
    assert not reporter.had_error
    assert reporter.diagnostics == []


def test_reporter_records_diagnostics_in_order() -> None:
    reporter = ErrorReporter()
    reporter.report(2, "first")
    reporter.report(1, "second")
    assert reporter.diagnostics == [Diagnostic(2, "first"), Diagnostic(1, "second")]
    assert reporter.had_error


def test_reporter_echoes_to_stream() -> None:
    stream = io.StringIO()
    reporter = ErrorReporter(stream=stream)
    reporter.report(3, "Unexpected character: '#'")
    assert stream.getvalue() == "[line 3] Error: Unexpected character: '#'\n"


def test_reporter_without_stream_is_silent(capsys) -> None:
    ErrorReporter().report(1, "quiet")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_reset_clears_errors() -> None:
    reporter = ErrorReporter()
    reporter.report(1, "oops")
    reporter.reset()
    assert not reporter.had_error
    assert reporter.diagnostics == []


def test_custom_sink_receives_scanner_errors() -> None:
    sink = _ListSink()
    tokenize('ok\n^\n"open', sink)
    assert sink.reports == [
        (2, "Unexpected character: '^'"),
        (3, "Unterminated string."),
    ]
