"""
Pattern values

An Item is one constraint inside a pattern slot. Its value is exactly one of
the closed set below:
- Nil: the literal nil
- Identifier: a bare or quoted identifier (emitted quoted)
- Number: a numeric literal, kept as its exact source text
- Variable: a ?-prefixed variable; the bare "?" is the wildcard
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

VARIABLE_SIGIL = "?"
WILDCARD = VARIABLE_SIGIL


@dataclass(frozen=True)
class Nil:
    def __str__(self) -> str:
        return "nil"


@dataclass(frozen=True)
class Identifier:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Variable:
    name: str

    @property
    def is_wildcard(self) -> bool:
        return self.name == WILDCARD

    @property
    def bare_name(self) -> str:
        """Name without its leading sigil."""
        if self.name.startswith(VARIABLE_SIGIL):
            return self.name[len(VARIABLE_SIGIL):]
        return self.name

    def __str__(self) -> str:
        return self.name


Value = Union[Nil, Identifier, Number, Variable]


@dataclass(frozen=True)
class Item:
    """A single, optionally negated, slot constraint."""
    value: Value
    negated: bool = False

    @property
    def is_wildcard(self) -> bool:
        return isinstance(self.value, Variable) and self.value.is_wildcard

    def __str__(self) -> str:
        prefix = "!" if self.negated else ""
        return f"{prefix}{self.value}"
