# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""EJS: syntax front end of a minimal embeddable scripting language."""

from ejs.compiler.errors import (
    Diagnostic,
    DiagnosticKind,
    EngineStateError,
    NestingLimitError,
    ScriptError,
    ScriptSyntaxError,
)
from ejs.engine import CheckResult, Engine, check_syntax, create, destroy
from ejs.workspace.config import ConfigError, EngineConfig, load_engine_config

__all__ = [
    "CheckResult",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "Engine",
    "EngineConfig",
    "EngineStateError",
    "NestingLimitError",
    "ScriptError",
    "ScriptSyntaxError",
    "check_syntax",
    "create",
    "destroy",
    "load_engine_config",
]
