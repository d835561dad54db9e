# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the EJS recursive-descent syntax checker."""

import pytest

from ejs.compiler.errors import (
    DiagnosticKind,
    InvalidIdentifierError,
    InvalidNumberError,
    NestingLimitError,
    ScriptError,
    ScriptSyntaxError,
    UnexpectedCharacterError,
    UnterminatedStatementError,
)
from ejs.compiler.parser import DEFAULT_MAX_NESTING_DEPTH, MAX_NESTING_DEPTH_LIMIT, check_program
from ejs.compiler.scanner import Scanner

# ###############
# Test Helpers
# ###############


def _check(source: str | bytes, max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> Scanner:
    """Check source and return the scanner it ran on."""
    scanner = Scanner(source)
    check_program(scanner, max_nesting_depth=max_nesting_depth)
    return scanner


def _error(source: str | bytes, max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> ScriptError:
    """Check source and return the error it raised."""
    with pytest.raises(ScriptError) as exc_info:
        _check(source, max_nesting_depth)
    return exc_info.value


# ###############
# Valid Programs
# ###############


class TestValidPrograms:
    @pytest.mark.parametrize(
        "source",
        [
            "",
            "   \n\t ",
            "// just a comment\n",
            "var x = 10 + 20;",
            "x = 5 * (2 + 3);",
            "var a = 1, b = a + 2;",
            "42;",
            "(1 + 2) * 3;",
            "x = f(1, 2) + g();",
            "x = f(g(1), h(2, 3));",
            "x = a - b / c * d;",
            "var _private = 1;",
            "_x = 1;",
            "x = _y + 1;",
            "snake_case_2 = other_name9;",
            "x = 1; y = 2; z = x + y;",
            "var a = 1;\nvar b = 2;\n",
            "x = ((((1))));",
            "x = 99999999999999999999999999;",
        ],
    )
    def test_accepted(self, source: str) -> None:
        _check(source)

    def test_comments_between_tokens(self) -> None:
        source = "var x // the x\n = // value\n 1 // done\n ; // end\n"
        _check(source)

    def test_trailing_comma_in_call_tolerated(self) -> None:
        _check("x = f(1, 2,);")

    def test_missing_call_separator_tolerated(self) -> None:
        _check("x = f(1 2);")

    def test_keyword_prefix_parsed_as_declaration(self) -> None:
        # `variable` reads as `var iable`.
        scanner = _check("variable = 5;")
        assert scanner.at_end()

    def test_line_count_at_end(self) -> None:
        scanner = _check("a = 1;\nb = 2;\n\nc = 3;\n")
        assert scanner.line == 5

    def test_identifier_span(self) -> None:
        scanner = Scanner("count = 1")
        with pytest.raises(UnterminatedStatementError):
            check_program(scanner)
        # The last terminal recognized was the number `1`.
        assert scanner.token == (8, 1)


# ###############
# Invalid Programs
# ###############


class TestInvalidPrograms:
    def test_missing_expression_in_declaration(self) -> None:
        error = _error("var x = ;")
        assert isinstance(error, InvalidNumberError)
        assert error.diagnostic.message == "[;]: expected digit"
        assert error.diagnostic.column == 9

    def test_bare_call_statement_rejected(self) -> None:
        error = _error("foo(1, 2);")
        assert isinstance(error, UnexpectedCharacterError)
        assert error.diagnostic.description == "expected '='"

    def test_missing_semicolon(self) -> None:
        error = _error("x = 1")
        assert isinstance(error, UnterminatedStatementError)
        assert error.diagnostic.kind == DiagnosticKind.UNTERMINATED_STATEMENT

    def test_missing_semicolon_before_next_statement(self) -> None:
        assert isinstance(_error("x = 1\ny = 2;"), UnterminatedStatementError)

    def test_unary_minus_not_recognized(self) -> None:
        assert isinstance(_error("x = -1;"), InvalidNumberError)

    def test_keyword_followed_by_digit_rejected(self) -> None:
        # `var1` reads as `var 1`, and `1` is not an identifier.
        assert isinstance(_error("var1 = 2;"), InvalidIdentifierError)

    def test_leading_comma_in_call_rejected(self) -> None:
        assert isinstance(_error("x = f(, 1);"), InvalidNumberError)

    def test_unclosed_call(self) -> None:
        assert isinstance(_error("x = f(1, 2;"), ScriptSyntaxError)

    @pytest.mark.parametrize(
        "source",
        [
            "x = (1 + 2;",
            "x = 1 + 2);",
            "x = ((1);",
            "(;",
            ");",
        ],
    )
    def test_unbalanced_parentheses_rejected(self, source: str) -> None:
        assert isinstance(_error(source), ScriptSyntaxError)

    @pytest.mark.parametrize(
        "source",
        [
            "x = 1 +;",
            "x = * 2;",
            "var = 1;",
            "var x 1;",
            "var x = 1,;",
            "= 1;",
            ";",
            "x = 1.5;",
            "x = 'a';",
        ],
    )
    def test_malformed_statements_rejected(self, source: str) -> None:
        assert isinstance(_error(source), ScriptSyntaxError)

    def test_non_ascii_rejected(self) -> None:
        assert isinstance(_error("x = é;"), ScriptSyntaxError)

    def test_carriage_return_is_whitespace(self) -> None:
        _check("x = 1;\r\ny = 2;\r\n")

    def test_error_line_number(self) -> None:
        error = _error("x = 1;\ny = 2;\nz = ;\n")
        assert error.diagnostic.line == 3
        assert error.diagnostic.column == 5

    def test_only_first_violation_reported(self) -> None:
        error = _error("x = ;\ny = ;")
        assert error.diagnostic.line == 1

    def test_statement_after_nul_is_ignored(self) -> None:
        _check(b"x = 1;\0 this is not checked")


# ###############
# Nesting Limit
# ###############


class TestNestingLimit:
    def test_nesting_at_limit_accepted(self) -> None:
        depth = 5
        _check("x = " + "(" * depth + "1" + ")" * depth + ";", max_nesting_depth=depth)

    def test_nesting_beyond_limit_rejected(self) -> None:
        depth = 5
        error = _error("x = " + "(" * (depth + 1) + "1" + ")" * (depth + 1) + ";", max_nesting_depth=depth)
        assert isinstance(error, NestingLimitError)
        assert not isinstance(error, ScriptSyntaxError)
        assert error.diagnostic.kind == DiagnosticKind.NESTING_LIMIT

    def test_call_arguments_count_toward_limit(self) -> None:
        assert isinstance(_error("x = f(g(h(1)));", max_nesting_depth=2), NestingLimitError)
        _check("x = f(g(1));", max_nesting_depth=2)

    def test_sibling_groups_do_not_accumulate(self) -> None:
        _check("x = (1) + (2) + (3) + (4);", max_nesting_depth=1)

    def test_default_limit_handles_deep_nesting(self) -> None:
        depth = DEFAULT_MAX_NESTING_DEPTH
        _check("x = " + "(" * depth + "1" + ")" * depth + ";")

    def test_pathological_nesting_fails_cleanly(self) -> None:
        error = _error("x = " + "(" * 10_000 + "1" + ")" * 10_000 + ";")
        assert isinstance(error, NestingLimitError)

    @pytest.mark.parametrize("opener", ["(", "f("])
    def test_largest_configurable_limit_accepted(self, opener: str) -> None:
        depth = MAX_NESTING_DEPTH_LIMIT
        _check("x = " + opener * depth + "1" + ")" * depth + ";", max_nesting_depth=depth)

    @pytest.mark.parametrize("opener", ["(", "f("])
    def test_one_past_largest_configurable_limit_rejected(self, opener: str) -> None:
        depth = MAX_NESTING_DEPTH_LIMIT + 1
        error = _error("x = " + opener * depth + "1" + ")" * depth + ";", max_nesting_depth=MAX_NESTING_DEPTH_LIMIT)
        assert isinstance(error, NestingLimitError)
