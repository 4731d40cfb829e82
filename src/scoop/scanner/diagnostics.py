# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic reporting for the Scoop scanner.

Scanning errors are not raised. The scanner hands each one to a sink and keeps
going, so a single pass reports every malformed span in the source. Callers
check the sink afterwards to decide whether the token list can be trusted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TextIO

# ###############
# Public Interface
# ###############

UNEXPECTED_CHARACTER = "Unexpected character"
UNTERMINATED_STRING = "Unterminated string"


class DiagnosticSink(Protocol):
    """Receiver for line-tagged, non-fatal scanning errors."""

    def report(self, line: int, message: str) -> None: ...


@dataclass(frozen=True)
class Diagnostic:
    """A single error reported while scanning.

    Attributes:
        line: 1-based line number the error was detected on.
        message: Human-readable description of the error.
    """

    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


@dataclass
class ErrorReporter:
    """Default diagnostic sink that records errors and optionally echoes them.

    Attributes:
        stream: Text stream each diagnostic is printed to as it arrives, or
            None to only record it.
        diagnostics: All diagnostics reported since creation or the last reset.
    """

    stream: TextIO | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, line: int, message: str) -> None:
        """Record a diagnostic for the given line."""
        diagnostic = Diagnostic(line=line, message=message)
        self.diagnostics.append(diagnostic)
        if self.stream is not None:
            print(diagnostic, file=self.stream)

    @property
    def had_error(self) -> bool:
        """Return True if any diagnostic has been reported."""
        return len(self.diagnostics) > 0

    def reset(self) -> None:
        """Forget all recorded diagnostics."""
        self.diagnostics.clear()
