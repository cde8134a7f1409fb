"""
Abstract ACT-R model

The model is built once (by the loader or by hand) and is read-only while
code is generated from it. All containers are tuples.

Key classes:
- ChunkType / Pattern / PatternSlot: chunk schemas and slot constraints
- Buffer / Memory: working state holders and declarative memory settings
- Match / SetStatement / RecallStatement / ClearStatement: production parts
- Production / Initializer / Model
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from actrgen.model.values import Item, Value


@dataclass(frozen=True)
class ChunkType:
    """
    A named record schema.

    Internal chunk types are pseudo-chunks (e.g. buffer status) that are never
    declared to the runtime.
    """
    name: str
    slot_names: Tuple[str, ...] = ()
    internal: bool = False

    @property
    def slot_count(self) -> int:
        return len(self.slot_names)


STATUS_CHUNK = ChunkType(name="_status", slot_names=("status",), internal=True)


@dataclass(frozen=True)
class PatternSlot:
    items: Tuple[Item, ...] = ()

    def __str__(self) -> str:
        return " ".join(str(item) for item in self.items)


@dataclass(frozen=True)
class Pattern:
    """A chunk type plus one PatternSlot per chunk slot, in slot order."""
    chunk: ChunkType
    slots: Tuple[PatternSlot, ...] = ()

    def __post_init__(self):
        if len(self.slots) != self.chunk.slot_count:
            raise ValueError(
                f"pattern for chunk '{self.chunk.name}' has {len(self.slots)} slots, "
                f"expected {self.chunk.slot_count}"
            )

    @property
    def is_status(self) -> bool:
        return self.chunk.internal and self.chunk.name == STATUS_CHUNK.name


@dataclass(frozen=True)
class Buffer:
    name: str
    imaginal_delay: Optional[float] = None

    @property
    def is_imaginal(self) -> bool:
        return self.imaginal_delay is not None


@dataclass(frozen=True)
class Memory:
    """Declarative memory settings. None means "not specified by the model"."""
    name: str = "memory"
    latency: Optional[float] = None
    threshold: Optional[float] = None


@dataclass(frozen=True)
class Initializer:
    """Seeds a buffer, or declarative memory when buffer is None."""
    pattern: Pattern
    buffer: Optional[Buffer] = None


@dataclass(frozen=True)
class Match:
    pattern: Pattern
    buffer: Optional[Buffer] = None
    memory: Optional[Memory] = None

    def __post_init__(self):
        if (self.buffer is None) == (self.memory is None):
            raise ValueError("a match requires exactly one of buffer or memory")


@dataclass(frozen=True)
class SetSlot:
    name: str
    value: Value


@dataclass(frozen=True)
class SetStatement:
    """Set a buffer from explicit slot assignments or from a full pattern."""
    buffer: Buffer
    chunk: Optional[ChunkType] = None
    slots: Optional[Tuple[SetSlot, ...]] = None
    pattern: Optional[Pattern] = None


@dataclass(frozen=True)
class RecallStatement:
    pattern: Pattern


@dataclass(frozen=True)
class ClearStatement:
    buffer_names: Tuple[str, ...] = ()


Statement = Union[SetStatement, RecallStatement, ClearStatement]


@dataclass(frozen=True)
class Production:
    name: str
    matches: Tuple[Match, ...] = ()
    statements: Tuple[Statement, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class Model:
    name: str
    description: str = ""
    buffers: Tuple[Buffer, ...] = ()
    memory: Memory = Memory()
    chunks: Tuple[ChunkType, ...] = ()
    initializers: Tuple[Initializer, ...] = ()
    productions: Tuple[Production, ...] = ()

    def lookup_buffer(self, name: str) -> Optional[Buffer]:
        """Get a buffer by name."""
        for buffer in self.buffers:
            if buffer.name == name:
                return buffer
        return None

    def lookup_chunk(self, name: str) -> Optional[ChunkType]:
        """Get a chunk type by name."""
        for chunk in self.chunks:
            if chunk.name == name:
                return chunk
        return None

    @property
    def imaginal(self) -> Optional[Buffer]:
        for buffer in self.buffers:
            if buffer.is_imaginal:
                return buffer
        return None
