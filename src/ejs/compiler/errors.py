# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics and exception types raised while checking EJS source."""

import enum

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class DiagnosticKind(enum.Enum):
    """Category of a failed check."""

    SYNTAX = "syntax"
    UNEXPECTED_CHARACTER = "unexpected-character"
    INVALID_IDENTIFIER = "invalid-identifier"
    INVALID_NUMBER = "invalid-number"
    UNTERMINATED_STATEMENT = "unterminated-statement"
    NESTING_LIMIT = "nesting-limit"


class Diagnostic(BaseModel):
    """Structured description of the first violation found in a source text.

    Attributes:
        kind: Category of the violation.
        message: Display text ``[<snippet>]: <description>``, clipped to the
            engine's message capacity.
        description: The failed condition, e.g. ``expected ';'``.
        snippet: Upcoming source text at the failure point.
        offset: 0-based byte offset of the failure point.
        line: 1-based line number of the failure point.
        column: 1-based column (in bytes) of the failure point.
        truncated: True if ``message`` was clipped.
    """

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    message: str
    description: str
    snippet: str
    offset: int
    line: int
    column: int
    truncated: bool = False

    def location(self) -> str:
        """Return ``line:column`` for display."""
        return f"{self.line}:{self.column}"


class ScriptError(Exception):
    """Base class for failures reported by the checker.

    Attributes:
        diagnostic: The structured diagnostic describing the failure.
    """

    kind = DiagnosticKind.SYNTAX

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(f"Line {diagnostic.line}, column {diagnostic.column}: {diagnostic.message}")
        self.diagnostic = diagnostic


class ScriptSyntaxError(ScriptError):
    """Raised when the source violates the grammar."""


class UnexpectedCharacterError(ScriptSyntaxError):
    """Raised when a specific operator or punctuation byte was expected."""

    kind = DiagnosticKind.UNEXPECTED_CHARACTER


class InvalidIdentifierError(ScriptSyntaxError):
    """Raised when an identifier was expected."""

    kind = DiagnosticKind.INVALID_IDENTIFIER


class InvalidNumberError(ScriptSyntaxError):
    """Raised when a numeric literal was expected."""

    kind = DiagnosticKind.INVALID_NUMBER


class UnterminatedStatementError(ScriptSyntaxError):
    """Raised when a statement is not closed by ``;``."""

    kind = DiagnosticKind.UNTERMINATED_STATEMENT


class NestingLimitError(ScriptError):
    """Raised when parentheses or call arguments nest deeper than allowed."""

    kind = DiagnosticKind.NESTING_LIMIT


class EngineStateError(Exception):
    """Raised when an engine is used after close or while a check is running."""
