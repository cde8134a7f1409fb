"""
actrgen pyactr emitter

Turns an abstract Model into pyactr source text:
- values: Item -> token text
- patterns: Pattern -> "isa" + keyed slot entries
- matches / statements: production conditions and actions
- script: ScriptAssembler, the whole program in fixed order
- writer: the line-oriented text sink
"""

from actrgen.emitter.writer import ScriptWriter, KeyValueList, open_script
from actrgen.emitter.values import encode_item, encode_value, format_float
from actrgen.emitter.patterns import emit_pattern, pattern_items
from actrgen.emitter.matches import emit_match
from actrgen.emitter.statements import emit_statement
from actrgen.emitter.script import ScriptAssembler, class_name_for, model_init_args

__all__ = [
    "ScriptWriter",
    "KeyValueList",
    "open_script",
    "encode_item",
    "encode_value",
    "format_float",
    "emit_pattern",
    "pattern_items",
    "emit_match",
    "emit_statement",
    "ScriptAssembler",
    "class_name_for",
    "model_init_args",
]
