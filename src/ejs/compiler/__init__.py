# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax front end for EJS: byte classification, scanning, and grammar checking."""

from ejs.compiler.charclass import CharClass, char_class
from ejs.compiler.errors import (
    Diagnostic,
    DiagnosticKind,
    EngineStateError,
    InvalidIdentifierError,
    InvalidNumberError,
    NestingLimitError,
    ScriptError,
    ScriptSyntaxError,
    UnexpectedCharacterError,
    UnterminatedStatementError,
)
from ejs.compiler.parser import DEFAULT_MAX_NESTING_DEPTH, check_program
from ejs.compiler.scanner import Scanner, normalize_source

__all__ = [
    "CharClass",
    "DEFAULT_MAX_NESTING_DEPTH",
    "Diagnostic",
    "DiagnosticKind",
    "EngineStateError",
    "InvalidIdentifierError",
    "InvalidNumberError",
    "NestingLimitError",
    "Scanner",
    "ScriptError",
    "ScriptSyntaxError",
    "UnexpectedCharacterError",
    "UnterminatedStatementError",
    "char_class",
    "check_program",
    "normalize_source",
]
