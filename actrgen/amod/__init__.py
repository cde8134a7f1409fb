"""
actrgen model front end

Default implementations of the collaborators that sit in front of the emitter:
- parser: chunk literal text -> Pattern
- loader: JSON model document -> Model
"""

from actrgen.amod.parser import parse_chunk, parse_item, parse_value
from actrgen.amod.loader import ModelDoc, load_model, load_model_file

__all__ = [
    "parse_chunk",
    "parse_item",
    "parse_value",
    "ModelDoc",
    "load_model",
    "load_model_file",
]
