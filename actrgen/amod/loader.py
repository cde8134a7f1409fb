"""
JSON model loader

Validates a JSON model document with pydantic and builds the immutable
Model handed to the emitter. Chunk patterns inside the document are chunk
literals (see actrgen.amod.parser).

Every model gets the "goal" and "retrieval" buffers and the internal
"_status" chunk; "imaginal" exists only when configured.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, model_validator

from actrgen.amod.parser import parse_chunk, parse_value
from actrgen.errors import BufferNotFoundError, ChunkParseError, ConfigurationError
from actrgen.model.model import (
    Buffer,
    ChunkType,
    ClearStatement,
    Initializer,
    Match,
    Memory,
    Model,
    Pattern,
    PatternSlot,
    Production,
    RecallStatement,
    STATUS_CHUNK,
    SetSlot,
    SetStatement,
    Statement,
)
from actrgen.model.values import Identifier, Item

logger = logging.getLogger(__name__)

DEFAULT_BUFFERS = ("goal", "retrieval")
IMAGINAL_BUFFER = "imaginal"


class ChunkDoc(BaseModel):
    name: str
    slots: List[str] = []


class MemoryDoc(BaseModel):
    latency: Optional[float] = None
    threshold: Optional[float] = None


class ImaginalDoc(BaseModel):
    delay: float = 0.2


class InitializerDoc(BaseModel):
    buffer: Optional[str] = None
    chunk: str


class MatchDoc(BaseModel):
    """A condition: a buffer or memory, plus a pattern or a status value."""
    buffer: Optional[str] = None
    memory: bool = False
    pattern: Optional[str] = None
    status: Optional[str] = None

    @model_validator(mode="after")
    def check_target(self):
        if (self.buffer is None) == (not self.memory):
            raise ValueError("match needs exactly one of 'buffer' or 'memory'")
        if (self.pattern is None) == (self.status is None):
            raise ValueError("match needs exactly one of 'pattern' or 'status'")
        return self


class SetDoc(BaseModel):
    buffer: str
    chunk: Optional[str] = None
    slots: Optional[List[Tuple[str, str]]] = None
    pattern: Optional[str] = None


class StatementDoc(BaseModel):
    set: Optional[SetDoc] = None
    recall: Optional[str] = None
    clear: Optional[List[str]] = None

    @model_validator(mode="after")
    def check_kind(self):
        kinds = [k for k in ("set", "recall", "clear") if getattr(self, k) is not None]
        if len(kinds) != 1:
            raise ValueError("statement needs exactly one of 'set', 'recall' or 'clear'")
        return self


class ProductionDoc(BaseModel):
    name: str
    description: Optional[str] = None
    match: List[MatchDoc] = []
    do: List[StatementDoc] = []


class ModelDoc(BaseModel):
    """Top-level JSON model document."""
    name: str = ""
    description: str = ""
    imaginal: Optional[ImaginalDoc] = None
    memory: MemoryDoc = MemoryDoc()
    chunks: List[ChunkDoc] = []
    initializers: List[InitializerDoc] = []
    productions: List[ProductionDoc] = []


def _status_pattern(status: str) -> Pattern:
    return Pattern(STATUS_CHUNK, (PatternSlot((Item(Identifier(status)),)),))


class ModelBuilder:
    """Builds a Model from a validated ModelDoc."""

    def __init__(self, doc: ModelDoc):
        self.doc = doc
        self.model = Model(
            name=doc.name,
            description=doc.description,
            buffers=self._build_buffers(),
            memory=Memory(latency=doc.memory.latency, threshold=doc.memory.threshold),
            chunks=self._build_chunks(),
        )

    def build(self) -> Model:
        initializers = tuple(
            self._build_initializer(index, init)
            for index, init in enumerate(self.doc.initializers)
        )
        productions = tuple(self._build_production(p) for p in self.doc.productions)

        logger.debug("Loaded model '%s': %d chunks, %d initializers, %d productions",
                     self.model.name, len(self.model.chunks), len(initializers), len(productions))

        return replace(self.model, initializers=initializers, productions=productions)

    def _build_buffers(self) -> Tuple[Buffer, ...]:
        buffers = [Buffer(name) for name in DEFAULT_BUFFERS]
        if self.doc.imaginal is not None:
            buffers.append(Buffer(IMAGINAL_BUFFER, imaginal_delay=self.doc.imaginal.delay))
        return tuple(buffers)

    def _build_chunks(self) -> Tuple[ChunkType, ...]:
        chunks = [STATUS_CHUNK]
        seen = set()
        for chunk in self.doc.chunks:
            if chunk.name.startswith("_"):
                raise ConfigurationError(f"chunk name '{chunk.name}' is reserved for internal chunks")
            if chunk.name in seen:
                raise ConfigurationError(f"duplicate chunk '{chunk.name}'")
            seen.add(chunk.name)
            chunks.append(ChunkType(chunk.name, tuple(chunk.slots)))
        return tuple(chunks)

    def _buffer(self, name: str) -> Buffer:
        buffer = self.model.lookup_buffer(name)
        if buffer is None:
            raise BufferNotFoundError(name, self.model.name, action="reference")
        return buffer

    def _pattern(self, text: str) -> Pattern:
        pattern = parse_chunk(self.model, text)
        if pattern is None:
            raise ChunkParseError("empty chunk")
        return pattern

    def _build_initializer(self, index: int, doc: InitializerDoc) -> Initializer:
        buffer = self._buffer(doc.buffer) if doc.buffer is not None else None
        try:
            pattern = self._pattern(doc.chunk)
        except ChunkParseError as e:
            raise ChunkParseError(f"error in initializer {index} - {e}") from e
        return Initializer(pattern, buffer)

    def _build_production(self, doc: ProductionDoc) -> Production:
        try:
            matches = tuple(self._build_match(m) for m in doc.match)
            statements = tuple(self._build_statement(s) for s in doc.do)
        except ChunkParseError as e:
            raise ChunkParseError(f"error in production '{doc.name}' - {e}") from e

        return Production(doc.name, matches, statements, doc.description)

    def _build_match(self, doc: MatchDoc) -> Match:
        if doc.status is not None:
            pattern = _status_pattern(doc.status)
        else:
            pattern = self._pattern(doc.pattern)

        if doc.memory:
            return Match(pattern, memory=self.model.memory)
        return Match(pattern, buffer=self._buffer(doc.buffer))

    def _build_statement(self, doc: StatementDoc) -> Statement:
        if doc.set is not None:
            return self._build_set(doc.set)
        if doc.recall is not None:
            return RecallStatement(self._pattern(doc.recall))

        for name in doc.clear:
            self._buffer(name)
        return ClearStatement(tuple(doc.clear))

    def _build_set(self, doc: SetDoc) -> SetStatement:
        buffer = self._buffer(doc.buffer)

        if doc.pattern is not None:
            return SetStatement(buffer, pattern=self._pattern(doc.pattern))

        if doc.slots is None:
            return SetStatement(buffer)

        chunk = self.model.lookup_chunk(doc.chunk) if doc.chunk else None
        if chunk is None or chunk.internal:
            raise ChunkParseError(f"could not find chunk named '{doc.chunk}'")

        slots = []
        for name, value in doc.slots:
            if name not in chunk.slot_names:
                raise ChunkParseError(f"chunk '{chunk.name}' has no slot named '{name}'")
            slots.append(SetSlot(name, parse_value(value)))

        return SetStatement(buffer, chunk=chunk, slots=tuple(slots))


def load_model(document: Dict[str, Any]) -> Model:
    """
    Build a Model from a JSON-compatible document.

    Raises:
        pydantic.ValidationError: document does not match the schema
        BufferNotFoundError: a buffer name is not part of the model
        ChunkParseError: a chunk literal failed to parse
        ConfigurationError: reserved or duplicate chunk names
    """
    doc = ModelDoc.model_validate(document)
    return ModelBuilder(doc).build()


def load_model_file(path: Union[str, Path]) -> Model:
    """Load a Model from a JSON file."""
    with open(path, encoding="utf-8") as f:
        document = json.load(f)
    return load_model(document)
