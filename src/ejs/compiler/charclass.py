# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Byte classification for the EJS scanner.

Every byte of the source maps to exactly one class. Classes are ordered so
that range checks double as predicates: anything above DIGIT starts an
identifier word, anything above DELIMITER may continue one.
"""

import enum

# ###############
# Public Interface
# ###############


class CharClass(enum.IntEnum):
    """Lexical class of a single source byte."""

    INVALID = 0
    DELIMITER = 1
    DIGIT = 2
    HEX_DIGIT = 3
    LETTER = 4


def char_class(byte: int) -> CharClass:
    """Return the class of ``byte``.

    Only printable ASCII plus tab, line feed and form feed are valid.
    Carriage return, DEL and every byte >= 0x80 classify as INVALID.
    """
    if byte < 0 or byte > 0x7F:
        return CharClass.INVALID
    if 0x30 <= byte <= 0x39:
        return CharClass.DIGIT
    if 0x41 <= byte <= 0x46 or 0x61 <= byte <= 0x66:
        return CharClass.HEX_DIGIT
    if 0x47 <= byte <= 0x5A or 0x67 <= byte <= 0x7A:
        return CharClass.LETTER
    if 0x20 <= byte <= 0x7E or byte in _CONTROL_DELIMITERS:
        return CharClass.DELIMITER
    return CharClass.INVALID


def is_letter(byte: int) -> bool:
    """Return True for ASCII letters (hex letters included)."""
    return char_class(byte) > CharClass.DIGIT


def is_alnum(byte: int) -> bool:
    """Return True for ASCII letters and digits."""
    return char_class(byte) > CharClass.DELIMITER


def is_digit(byte: int) -> bool:
    return char_class(byte) == CharClass.DIGIT


def is_space(byte: int) -> bool:
    """Return True for space, tab, carriage return and line feed.

    Independent of the class table: CR is whitespace here even though it is
    an INVALID class byte.
    """
    return byte in _SPACES


def is_identifier_start(byte: int) -> bool:
    return byte == _UNDERSCORE or is_letter(byte)


def is_identifier_char(byte: int) -> bool:
    return byte == _UNDERSCORE or is_alnum(byte)


# ################
# Implementation
# ################

# Tab, line feed, form feed.
_CONTROL_DELIMITERS = frozenset({0x09, 0x0A, 0x0C})

_SPACES = frozenset(b" \t\r\n")

_UNDERSCORE = ord("_")
