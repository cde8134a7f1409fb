"""
actrgen abstract model

Immutable description of an ACT-R model handed to the emitter:
- values: Item and the Nil / Identifier / Number / Variable value union
- model: chunk types, patterns, buffers, memory, matches, statements,
  productions and the Model itself
"""

from actrgen.model.values import (
    Item,
    Nil,
    Identifier,
    Number,
    Variable,
    Value,
    WILDCARD,
)
from actrgen.model.model import (
    ChunkType,
    STATUS_CHUNK,
    PatternSlot,
    Pattern,
    Buffer,
    Memory,
    Initializer,
    Match,
    SetSlot,
    SetStatement,
    RecallStatement,
    ClearStatement,
    Statement,
    Production,
    Model,
)

__all__ = [
    "Item",
    "Nil",
    "Identifier",
    "Number",
    "Variable",
    "Value",
    "WILDCARD",
    "ChunkType",
    "STATUS_CHUNK",
    "PatternSlot",
    "Pattern",
    "Buffer",
    "Memory",
    "Initializer",
    "Match",
    "SetSlot",
    "SetStatement",
    "RecallStatement",
    "ClearStatement",
    "Statement",
    "Production",
    "Model",
]
