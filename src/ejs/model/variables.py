# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Variable records and the per-engine symbol table."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from pydantic import BaseModel

# ###############
# Public Interface
# ###############


class VarType(enum.Enum):
    """Runtime type tag of a variable value."""

    OBJ = "object"
    INT = "integer"
    DBL = "double"
    STR = "string"
    FUNC = "function"


class Variable(BaseModel):
    """A named value owned by an engine's symbol table."""

    name: str
    type: VarType
    value: int | float | str | None = None


class SymbolTable:
    """Ordered collection of variables keyed by name.

    Insertion order is preserved; adding a name that already exists replaces
    the record in its original position.
    """

    def __init__(self) -> None:
        self._variables: dict[str, Variable] = {}

    def add(self, variable: Variable) -> None:
        self._variables[variable.name] = variable

    def get(self, name: str) -> Variable | None:
        """Return the variable called ``name``, or None if absent."""
        return self._variables.get(name)

    def remove(self, name: str) -> Variable:
        """Remove and return the variable called ``name``.

        Raises:
            KeyError: If no such variable exists.
        """
        return self._variables.pop(name)

    def clear(self) -> None:
        self._variables.clear()

    def names(self) -> list[str]:
        return list(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._variables.values())
