# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Engine handle: owns the symbol table and runs syntax checks.

An engine is created once, may check any number of source texts one after
another, and is closed once. Each check starts from fresh scan state; the
symbol table persists across checks.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import TracebackType

from ejs.compiler.errors import Diagnostic, EngineStateError, ScriptError
from ejs.compiler.parser import check_program
from ejs.compiler.scanner import Scanner
from ejs.model.variables import SymbolTable
from ejs.workspace.config import EngineConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one source text.

    Attributes:
        ok: True if the whole text is a valid program.
        diagnostic: The first violation, or None on success.
    """

    ok: bool
    diagnostic: Diagnostic | None = None


class Engine:
    """A reusable syntax-checking engine.

    Attributes:
        config: Limits and formatting options for every check.
        symbols: Variables owned by this engine. Checks never read or write it.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.symbols = SymbolTable()
        self._diagnostic: Diagnostic | None = None
        self._line = 1
        self._closed = False
        self._in_flight = threading.Lock()

    def __enter__(self) -> Engine:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def diagnostic(self) -> Diagnostic | None:
        """Diagnostic of the last failed check, or None after a success."""
        return self._diagnostic

    @property
    def error_message(self) -> str:
        """Message text of the last failed check, or an empty string."""
        return self._diagnostic.message if self._diagnostic else ""

    @property
    def line(self) -> int:
        """Line reached by the last check: the failing line, or the last line."""
        return self._line

    def exec(self, source: bytes | str) -> bool:
        """Check ``source`` and return True if it is a valid program.

        On failure the diagnostic is kept on the engine; see ``diagnostic``
        and ``error_message``.

        Raises:
            EngineStateError: If the engine is closed or already running a check.
        """
        return self.check(source).ok

    def check(self, source: bytes | str) -> CheckResult:
        """Check ``source`` and return the structured outcome.

        Raises:
            EngineStateError: If the engine is closed or already running a check.
        """
        if self._closed:
            raise EngineStateError("engine is closed")
        if not self._in_flight.acquire(blocking=False):
            raise EngineStateError("engine is already running a check")
        try:
            return self._run(source)
        finally:
            self._in_flight.release()

    def close(self) -> None:
        """Release the symbol table. The engine cannot check afterwards."""
        if self._closed:
            return
        self.symbols.clear()
        self._diagnostic = None
        self._closed = True

    def _run(self, source: bytes | str) -> CheckResult:
        scanner = _new_scanner(source, self.config)
        logger.debug("checking %d bytes", len(scanner.source))
        try:
            check_program(scanner, max_nesting_depth=self.config.max_nesting_depth)
        except ScriptError as exc:
            self._diagnostic = exc.diagnostic
            self._line = scanner.line
            logger.debug("check failed at %s: %s", exc.diagnostic.location(), exc.diagnostic.message)
            return CheckResult(ok=False, diagnostic=exc.diagnostic)
        self._diagnostic = None
        self._line = scanner.line
        logger.debug("check passed, %d line(s)", scanner.line)
        return CheckResult(ok=True)


def create(config: EngineConfig | None = None) -> Engine:
    """Create an engine with an empty symbol table."""
    return Engine(config)


def destroy(engine: Engine) -> None:
    """Close ``engine``; equivalent to ``engine.close()``."""
    engine.close()


def check_syntax(source: bytes | str, config: EngineConfig | None = None) -> None:
    """Check ``source`` and raise on the first violation.

    Raises:
        ScriptSyntaxError: On the first grammar violation.
        NestingLimitError: If nesting exceeds the configured limit.
    """
    config = config or EngineConfig()
    check_program(_new_scanner(source, config), max_nesting_depth=config.max_nesting_depth)


# ################
# Implementation
# ################


def _new_scanner(source: bytes | str, config: EngineConfig) -> Scanner:
    return Scanner(
        source,
        snippet_length=config.snippet_length,
        message_capacity=config.error_message_capacity,
    )
