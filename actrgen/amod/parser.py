"""
Chunk text parser

Parses a chunk literal such as

    [countFrom: 2 5 starting]
    [count: ?x !nil 'quoted text' ?]

into a Pattern validated against the model's chunk types. One item per slot.
"""

from __future__ import annotations

import re
from typing import List, Optional

from actrgen.errors import ChunkParseError
from actrgen.model.model import Model, Pattern, PatternSlot
from actrgen.model.values import (
    Identifier,
    Item,
    Nil,
    Number,
    VARIABLE_SIGIL,
    Value,
    Variable,
)

_CHUNK_RE = re.compile(r"^\s*\[\s*([A-Za-z_][\w-]*)\s*(?::(.*))?\]\s*$", re.DOTALL)
_TOKEN_RE = re.compile(r"""!?(?:'[^']*'|"[^"]*"|[^\s'"]+)""")
_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")
_VARIABLE_RE = re.compile(r"^\?[A-Za-z_]?\w*$")


def parse_value(token: str) -> Value:
    """Parse a single un-negated value token."""
    if not token:
        raise ChunkParseError("empty value")

    if token == "nil":
        return Nil()
    if token.startswith(VARIABLE_SIGIL):
        if not _VARIABLE_RE.match(token):
            raise ChunkParseError(f"invalid variable '{token}'")
        return Variable(token)
    if _NUMBER_RE.match(token):
        return Number(token)
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "'\"":
        return Identifier(token[1:-1])
    return Identifier(token)


def parse_item(token: str) -> Item:
    negated = token.startswith("!")
    if negated:
        token = token[1:]
    return Item(parse_value(token), negated=negated)


def tokenize(text: str) -> List[str]:
    tokens = _TOKEN_RE.findall(text)
    if "".join("".join(tokens).split()) != "".join(text.split()):
        raise ChunkParseError(f"unterminated quote in '{text.strip()}'")
    return tokens


def parse_chunk(model: Model, text: Optional[str]) -> Optional[Pattern]:
    """
    Parse chunk text against a model.

    Args:
        model: Model supplying the chunk type definitions
        text: Chunk literal; empty or None means "no chunk"

    Returns:
        The parsed Pattern, or None for empty text

    Raises:
        ChunkParseError: malformed text, unknown or internal chunk type,
            or wrong number of slot values
    """
    if text is None or not text.strip():
        return None

    m = _CHUNK_RE.match(text)
    if m is None:
        raise ChunkParseError(f"invalid chunk - expected '[chunk: values...]', got '{text.strip()}'")

    chunk_name, body = m.group(1), m.group(2) or ""

    chunk = model.lookup_chunk(chunk_name)
    if chunk is None:
        raise ChunkParseError(f"could not find chunk named '{chunk_name}'")
    if chunk.internal:
        raise ChunkParseError(f"cannot use internal chunk '{chunk_name}' here")

    tokens = tokenize(body)
    if len(tokens) != chunk.slot_count:
        raise ChunkParseError(
            f"invalid chunk - '{chunk_name}' expects {chunk.slot_count} slots, got {len(tokens)}"
        )

    slots = tuple(PatternSlot((parse_item(token),)) for token in tokens)
    return Pattern(chunk, slots)
