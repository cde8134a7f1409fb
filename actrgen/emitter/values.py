"""Value encoding for pyactr chunk strings."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from actrgen.model.values import Item, Nil, Identifier, Number, Variable, Value

NEGATION_PREFIX = "~"
VARIABLE_PREFIX = "="
QUOTE = '"'


def encode_value(value: Value) -> str:
    """Encode a single non-wildcard value."""
    if isinstance(value, Nil):
        return "nil"
    if isinstance(value, Identifier):
        return f"{QUOTE}{value.value}{QUOTE}"
    if isinstance(value, Number):
        return value.text
    if isinstance(value, Variable):
        return VARIABLE_PREFIX + value.bare_name
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def encode_item(item: Item) -> Optional[str]:
    """
    Encode an item as it appears in a pyactr chunk string.

    Returns None for the wildcard variable; the caller must then skip the
    slot entry entirely.
    """
    if item.is_wildcard:
        return None

    prefix = NEGATION_PREFIX if item.negated else ""
    return prefix + encode_value(item.value)


def format_float(value: float) -> str:
    """Minimal positional form of a float: 2.5000 -> "2.5", 2.0 -> "2"."""
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
