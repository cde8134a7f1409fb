"""Test fixtures for the actrgen test suite."""
import pytest
import sys
from pathlib import Path
from typing import Dict, Any

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actrgen.amod.loader import load_model
from actrgen.model import (
    Buffer,
    ChunkType,
    Identifier,
    Item,
    Memory,
    Model,
    Nil,
    Number,
    Pattern,
    PatternSlot,
    STATUS_CHUNK,
    Variable,
)


def slot(*items: Item) -> PatternSlot:
    return PatternSlot(tuple(items))


def var(name: str, negated: bool = False) -> Item:
    return Item(Variable(name), negated=negated)


def ident(value: str, negated: bool = False) -> Item:
    return Item(Identifier(value), negated=negated)


def num(text: str, negated: bool = False) -> Item:
    return Item(Number(text), negated=negated)


def nil(negated: bool = False) -> Item:
    return Item(Nil(), negated=negated)


@pytest.fixture
def count_chunk() -> ChunkType:
    return ChunkType("count", ("first", "second"))


@pytest.fixture
def count_from_chunk() -> ChunkType:
    return ChunkType("countFrom", ("start", "end", "count"))


@pytest.fixture
def goal_buffer() -> Buffer:
    return Buffer("goal")


@pytest.fixture
def status_pattern():
    """Factory for _status patterns."""
    def make(status: str) -> Pattern:
        return Pattern(STATUS_CHUNK, (slot(ident(status)),))
    return make


@pytest.fixture
def count_document() -> Dict[str, Any]:
    """JSON document for the classic counting model."""
    return {
        "name": "count",
        "description": "This is a model which adds numbers.",
        "memory": {"latency": 0.5},
        "chunks": [
            {"name": "count", "slots": ["first", "second"]},
            {"name": "countFrom", "slots": ["start", "end", "count"]},
        ],
        "initializers": [
            {"chunk": "[count: 0 1]"},
            {"chunk": "[count: 1 2]"},
            {"chunk": "[count: 2 3]"},
            {"chunk": "[count: 3 4]"},
            {"chunk": "[count: 4 5]"},
            {"buffer": "goal", "chunk": "[countFrom: 2 5 starting]"},
        ],
        "productions": [
            {
                "name": "start",
                "description": "Starts things off",
                "match": [{"buffer": "goal", "pattern": "[countFrom: ?start ?end starting]"}],
                "do": [
                    {"recall": "[count: ?start ?]"},
                    {"set": {"buffer": "goal", "chunk": "countFrom",
                             "slots": [["count", "counting"]]}},
                ],
            },
            {
                "name": "increment",
                "match": [
                    {"buffer": "goal", "pattern": "[countFrom: ?x !?x counting]"},
                    {"memory": True, "pattern": "[count: ?x ?next]"},
                ],
                "do": [
                    {"set": {"buffer": "goal", "chunk": "countFrom",
                             "slots": [["start", "?next"]]}},
                    {"recall": "[count: ?next ?]"},
                ],
            },
            {
                "name": "stop",
                "match": [
                    {"buffer": "goal", "pattern": "[countFrom: ?x ?x counting]"},
                    {"buffer": "retrieval", "status": "full"},
                ],
                "do": [{"clear": ["goal"]}],
            },
            {
                "name": "failed",
                "match": [{"memory": True, "status": "error"}],
                "do": [{"set": {"buffer": "goal", "pattern": "[countFrom: nil nil 'stopped']"}}],
            },
        ],
    }


@pytest.fixture
def count_model(count_document) -> Model:
    return load_model(count_document)


@pytest.fixture
def bare_model(count_chunk) -> Model:
    """Minimal hand-built model with no initializers or productions."""
    return Model(
        name="bare",
        description="bare model",
        buffers=(Buffer("goal"), Buffer("retrieval")),
        memory=Memory(),
        chunks=(STATUS_CHUNK, count_chunk),
    )
