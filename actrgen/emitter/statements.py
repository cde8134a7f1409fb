"""Statement emission: the action side of a production string."""

from __future__ import annotations

from actrgen.emitter.matches import RETRIEVAL_BUFFER
from actrgen.emitter.patterns import emit_pattern
from actrgen.emitter.values import encode_value
from actrgen.emitter.writer import INDENT, KeyValueList, ScriptWriter
from actrgen.errors import UnsupportedStatementError
from actrgen.model.model import (
    ClearStatement,
    RecallStatement,
    SetStatement,
    Statement,
)


def _emit_set(writer: ScriptWriter, statement: SetStatement) -> None:
    buffer_name = statement.buffer.name

    if statement.slots is not None:
        if statement.chunk is None:
            raise UnsupportedStatementError(
                f"set on buffer '{buffer_name}' has slot assignments but no chunk type"
            )

        items = KeyValueList()
        items.add("isa", statement.chunk.name)
        for slot in statement.slots:
            items.add(slot.name, encode_value(slot.value))

        writer.writeln(f"{INDENT}={buffer_name}>")
        writer.tab_write(2, items)

    elif statement.pattern is not None:
        writer.writeln(f"{INDENT}={buffer_name}>")
        emit_pattern(writer, statement.pattern, 2)

    else:
        raise UnsupportedStatementError(
            f"set on buffer '{buffer_name}' has neither slot assignments nor a pattern"
        )


def emit_statement(writer: ScriptWriter, statement: Statement) -> None:
    if isinstance(statement, SetStatement):
        _emit_set(writer, statement)
    elif isinstance(statement, RecallStatement):
        writer.writeln(f"{INDENT}+{RETRIEVAL_BUFFER}>")
        emit_pattern(writer, statement.pattern, 2)
    elif isinstance(statement, ClearStatement):
        for name in statement.buffer_names:
            writer.writeln(f"{INDENT}~{name}>")
    else:
        raise TypeError(f"unsupported statement type: {type(statement).__name__}")
