# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent syntax checker for EJS programs.

Grammar::

    program     = { statement } ;
    statement   = declaration | assignment | expression , ";" ;
    declaration = "var" , assignment , { "," , assignment } , ";" ;
    assignment  = identifier , "=" , expression ;
    expression  = term , { ("+" | "-") , term } ;
    term        = factor , { ("*" | "/") , factor } ;
    factor      = number
                | identifier , [ "(" , { expression , [","] } , ")" ]
                | "(" , expression , ")" ;
    identifier  = (letter | "_") , { letter | digit | "_" } ;
    number      = digit , { digit } ;

The checker walks the grammar and builds nothing; the first violation
raises and ends the walk.
"""

from ejs.compiler.charclass import is_digit, is_identifier_char, is_identifier_start
from ejs.compiler.errors import InvalidIdentifierError, InvalidNumberError, NestingLimitError
from ejs.compiler.scanner import Scanner

# ###############
# Public Interface
# ###############

DEFAULT_MAX_NESTING_DEPTH = 128

# Four stack frames per level of call nesting must fit the default recursion limit.
MAX_NESTING_DEPTH_LIMIT = 192


def check_program(scanner: Scanner, max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> None:
    """Check every statement remaining in ``scanner``.

    Leading whitespace and comments are skipped first.

    Raises:
        ScriptSyntaxError: On the first grammar violation.
        NestingLimitError: If nesting exceeds ``max_nesting_depth``.
    """
    _Parser(scanner, max_nesting_depth).parse_program()


# ################
# Implementation
# ################


class _Parser:
    """Grammar productions over a scanner, one method per production."""

    def __init__(self, scanner: Scanner, max_nesting_depth: int) -> None:
        self._scanner = scanner
        self._max_depth = max_nesting_depth
        self._depth = 0

    def parse_program(self) -> None:
        self._scanner.skip_whitespace_and_comments()
        while not self._scanner.at_end():
            self._parse_statement()

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statement(self) -> None:
        scanner = self._scanner
        if scanner.test_and_skip("var"):
            self._parse_declaration()
        # `_` starts an identifier here too, unlike a plain letter check.
        elif is_identifier_start(scanner.current()):
            self._parse_assignment()
        else:
            self._parse_expression()
        scanner.match(";")

    def _parse_declaration(self) -> None:
        self._parse_assignment()
        while self._scanner.test_and_skip(","):
            self._parse_assignment()

    def _parse_assignment(self) -> None:
        self._parse_identifier()
        self._scanner.match("=")
        self._parse_expression()

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expression(self) -> None:
        scanner = self._scanner
        self._parse_term()
        while scanner.is_at("+") or scanner.is_at("-"):
            scanner.match(chr(scanner.current()))
            self._parse_term()

    def _parse_term(self) -> None:
        scanner = self._scanner
        self._parse_factor()
        while scanner.is_at("*") or scanner.is_at("/"):
            scanner.match(chr(scanner.current()))
            self._parse_factor()

    def _parse_factor(self) -> None:
        scanner = self._scanner
        if scanner.is_at("("):
            self._enter_nesting()
            scanner.match("(")
            self._parse_expression()
            scanner.match(")")
            self._depth -= 1
        # Accepts a leading `_`, matching the identifier production.
        elif is_identifier_start(scanner.current()):
            self._parse_identifier()
            if scanner.is_at("("):
                self._parse_call_arguments()
        else:
            self._parse_number()

    def _parse_call_arguments(self) -> None:
        # Separators are optional, so `f(1 2)` and `f(1,)` are accepted.
        scanner = self._scanner
        self._enter_nesting()
        scanner.match("(")
        while not scanner.is_at(")"):
            self._parse_expression()
            if scanner.is_at(","):
                scanner.match(",")
        scanner.match(")")
        self._depth -= 1

    def _enter_nesting(self) -> None:
        if self._depth >= self._max_depth:
            self._scanner.fail(NestingLimitError, f"nesting deeper than {self._max_depth}")
        self._depth += 1

    # ------------------------------------------------------------------
    # Terminals
    # ------------------------------------------------------------------

    def _parse_identifier(self) -> None:
        scanner = self._scanner
        if not is_identifier_start(scanner.current()):
            scanner.fail(InvalidIdentifierError, "expected identifier")
        scanner.begin_token()
        scanner.advance()
        while is_identifier_char(scanner.current()):
            scanner.advance()
        scanner.end_token()
        scanner.skip_whitespace_and_comments()

    def _parse_number(self) -> int:
        """Parse an unsigned decimal literal and return its value."""
        scanner = self._scanner
        if not is_digit(scanner.current()):
            scanner.fail(InvalidNumberError, "expected digit")
        scanner.begin_token()
        value = 0
        while is_digit(scanner.current()):
            value = value * 10 + scanner.advance() - _ZERO
        scanner.end_token()
        scanner.skip_whitespace_and_comments()
        return value


_ZERO = ord("0")
