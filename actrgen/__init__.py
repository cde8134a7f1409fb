"""
actrgen - ACT-R model compiler, pyactr backend

Deterministically turns an abstract ACT-R model into a runnable pyactr
script and runs it.

Exports:
- Model and friends: the immutable abstract model
- ScriptAssembler: writes the pyactr program
- PyACTR: generate + run facade
- load_model / parse_chunk: default front end
"""

__version__ = "0.3.0"

from actrgen.errors import (
    ActrGenError,
    ConfigurationError,
    BufferNotFoundError,
    ChunkParseError,
    UnsupportedStatementError,
    PreflightError,
    ExecutionError,
)
from actrgen.model import Model, Pattern, ChunkType
from actrgen.emitter import ScriptAssembler
from actrgen.framework import PyACTR, FrameworkConfig, RunResult
from actrgen.amod import load_model, load_model_file, parse_chunk

__all__ = [
    "ActrGenError",
    "ConfigurationError",
    "BufferNotFoundError",
    "ChunkParseError",
    "UnsupportedStatementError",
    "PreflightError",
    "ExecutionError",
    "Model",
    "Pattern",
    "ChunkType",
    "ScriptAssembler",
    "PyACTR",
    "FrameworkConfig",
    "RunResult",
    "load_model",
    "load_model_file",
    "parse_chunk",
    "__version__",
]
