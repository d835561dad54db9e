# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value model for EJS: variable records and the symbol table."""

from ejs.model.variables import SymbolTable, Variable, VarType

__all__ = [
    "SymbolTable",
    "VarType",
    "Variable",
]
