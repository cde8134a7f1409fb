"""Pattern emission: "isa" plus one keyed entry per slot constraint."""

from __future__ import annotations

from actrgen.emitter.values import encode_item
from actrgen.emitter.writer import KeyValueList, ScriptWriter
from actrgen.model.model import Pattern, PatternSlot


def add_pattern_slot(items: KeyValueList, slot_name: str, slot: PatternSlot) -> None:
    """Add one entry per non-wildcard item, all keyed by slot_name."""
    for item in slot.items:
        value = encode_item(item)
        if value is None:
            continue
        items.add(slot_name, value)


def pattern_items(pattern: Pattern) -> KeyValueList:
    items = KeyValueList()
    items.add("isa", pattern.chunk.name)

    for slot_name, slot in zip(pattern.chunk.slot_names, pattern.slots):
        add_pattern_slot(items, slot_name, slot)

    return items


def emit_pattern(writer: ScriptWriter, pattern: Pattern, depth: int) -> None:
    writer.tab_write(depth, pattern_items(pattern))
