"""
Match emission

Conditions of a production, written inside a pyactr production string:

    =goal>              buffer binding (ordinary chunk)
        isa ...
    ?goal>              buffer condition (status query)
        buffer full
    =retrieval>         memory binding, chunk type only
        isa count
    ?retrieval>         memory condition (status query)
        state error
"""

from __future__ import annotations

import logging

from actrgen.emitter.patterns import emit_pattern
from actrgen.emitter.writer import INDENT, KeyValueList, ScriptWriter
from actrgen.model.model import Match, Pattern

logger = logging.getLogger(__name__)

RETRIEVAL_BUFFER = "retrieval"


def _status_text(pattern: Pattern) -> str:
    return str(pattern.slots[0])


def _emit_condition(writer: ScriptWriter, buffer_name: str, key: str, pattern: Pattern) -> None:
    if not pattern.is_status:
        logger.warning("Skipping match on internal chunk '%s'", pattern.chunk.name)
        return

    items = KeyValueList()
    items.add(key, _status_text(pattern))

    writer.writeln(f"{INDENT}?{buffer_name}>")
    writer.tab_write(2, items)


def emit_match(writer: ScriptWriter, match: Match) -> None:
    pattern = match.pattern

    if match.buffer is not None:
        buffer_name = match.buffer.name

        if pattern.chunk.internal:
            _emit_condition(writer, buffer_name, "buffer", pattern)
        else:
            writer.writeln(f"{INDENT}={buffer_name}>")
            emit_pattern(writer, pattern, 2)

    elif match.memory is not None:
        if pattern.chunk.internal:
            _emit_condition(writer, RETRIEVAL_BUFFER, "state", pattern)
        else:
            items = KeyValueList()
            items.add("isa", pattern.chunk.name)

            writer.writeln(f"{INDENT}={RETRIEVAL_BUFFER}>")
            writer.tab_write(2, items)
