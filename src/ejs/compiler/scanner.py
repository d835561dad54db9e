# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cursor-based scanner for EJS source text.

The scanner never produces a token list. The parser pulls terminals straight
from the raw bytes through the matchers below, and the scanner keeps the
position, line number and span of the last identifier or number.
"""

import logging
from typing import NoReturn

from ejs.compiler.charclass import is_space
from ejs.compiler.errors import Diagnostic, ScriptError, UnexpectedCharacterError, UnterminatedStatementError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_SNIPPET_LENGTH = 10
DEFAULT_MESSAGE_CAPACITY = 100


def normalize_source(source: bytes | str) -> bytes:
    """Return the checked byte view of ``source``.

    Text is UTF-8 encoded, so non-ASCII characters become invalid bytes.
    The source ends at the first NUL byte, if any.
    """
    data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


class Scanner:
    """Read position and terminal matchers over one source text.

    Attributes:
        pos: 0-based offset of the next unconsumed byte.
        line: 1-based line number at ``pos``.
    """

    def __init__(
        self,
        source: bytes | str,
        snippet_length: int = DEFAULT_SNIPPET_LENGTH,
        message_capacity: int = DEFAULT_MESSAGE_CAPACITY,
    ) -> None:
        self._source = normalize_source(source)
        self._snippet_length = snippet_length
        self._message_capacity = message_capacity
        self._token_start = 0
        self._token_length = 0
        self.pos = 0
        self.line = 1

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def token(self) -> tuple[int, int]:
        """Span ``(start, length)`` of the last identifier or number.

        Only meaningful right after the parser recognized one of them.
        """
        return self._token_start, self._token_length

    # ------------------------------------------------------------------
    # Low-level byte access
    # ------------------------------------------------------------------

    def at_end(self) -> bool:
        return self.pos >= len(self._source)

    def current(self) -> int:
        """Return the byte at the cursor, or 0 at end of input."""
        if self.pos < len(self._source):
            return self._source[self.pos]
        return 0

    def peek(self, offset: int = 1) -> int:
        """Return the byte ``offset`` positions ahead, or 0 past the end."""
        index = self.pos + offset
        if index < len(self._source):
            return self._source[index]
        return 0

    def is_at(self, ch: str) -> bool:
        """Return True if the byte at the cursor is ``ch``."""
        return self.current() == ord(ch)

    def advance(self) -> int:
        """Consume the byte at the cursor and return it."""
        byte = self._source[self.pos]
        self.pos += 1
        if byte == _NEWLINE:
            self.line += 1
        return byte

    def begin_token(self) -> None:
        self._token_start = self.pos
        self._token_length = 0

    def end_token(self) -> None:
        self._token_length = self.pos - self._token_start

    # ------------------------------------------------------------------
    # Whitespace, comments and terminal matchers
    # ------------------------------------------------------------------

    def skip_whitespace_and_comments(self) -> None:
        """Skip whitespace runs and ``//`` line comments.

        A comment is skipped up to its newline; the newline is taken by the
        next whitespace run, so the loop ends only when neither applies.
        """
        while not self.at_end():
            if is_space(self.current()):
                self.advance()
            elif self.current() == _SLASH and self.peek() == _SLASH:
                while not self.at_end() and self.current() != _NEWLINE:
                    self.advance()
            else:
                break

    def match(self, ch: str) -> None:
        """Consume ``ch`` and any whitespace after it.

        Raises:
            UnterminatedStatementError: If ``ch`` is ``;`` and not present.
            UnexpectedCharacterError: If any other ``ch`` is not present.
        """
        if not self.is_at(ch):
            error_type = UnterminatedStatementError if ch == ";" else UnexpectedCharacterError
            self.fail(error_type, f"expected {ch!r}")
        self.advance()
        self.skip_whitespace_and_comments()

    def test_and_skip(self, keyword: str) -> bool:
        """Consume ``keyword`` if the input continues with it.

        No word boundary is checked: ``variable`` matches ``var``.
        """
        text = keyword.encode("ascii")
        if self._source.startswith(text, self.pos):
            for _ in text:
                self.advance()
            self.skip_whitespace_and_comments()
            return True
        return False

    # ------------------------------------------------------------------
    # Error signaling
    # ------------------------------------------------------------------

    def diagnose(self, error_type: type[ScriptError], description: str) -> Diagnostic:
        """Build a diagnostic for a failure at the cursor."""
        snippet = self._source[self.pos : self.pos + self._snippet_length].decode("ascii", errors="backslashreplace")
        message = f"[{snippet}]: {description}"
        limit = self._message_capacity - 1
        truncated = len(message) > limit
        if truncated:
            message = message[:limit]
        return Diagnostic(
            kind=error_type.kind,
            message=message,
            description=description,
            snippet=snippet,
            offset=self.pos,
            line=self.line,
            column=self.pos - self._source.rfind(b"\n", 0, self.pos),
            truncated=truncated,
        )

    def fail(self, error_type: type[ScriptError], description: str) -> NoReturn:
        """Raise ``error_type`` for a failure at the cursor."""
        diagnostic = self.diagnose(error_type, description)
        logger.debug("line %d: %s", diagnostic.line, diagnostic.message)
        raise error_type(diagnostic)


# ################
# Implementation
# ################

_NEWLINE = ord("\n")
_SLASH = ord("/")
