"""
Line-oriented text sink

ScriptWriter wraps any text stream and records everything written so the
generated code can be handed back after the stream is closed. open_script()
is the file-backed form: the file is released on every exit path and
removed when generation fails.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Tuple, Union

INDENT = "\t"


class KeyValueList:
    """Ordered key/value entries; duplicate keys are allowed."""

    def __init__(self):
        self.entries: List[Tuple[str, str]] = []

    def add(self, key: str, value: str) -> None:
        self.entries.append((key, value))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


class ScriptWriter:

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else io.StringIO()
        self._parts: List[str] = []

    def write(self, text: str) -> None:
        self.stream.write(text)
        self._parts.append(text)

    def writeln(self, text: str = "") -> None:
        self.write(text + "\n")

    def tab_write(self, depth: int, items: KeyValueList) -> None:
        """Write each entry as an indented "key<TAB>value" line."""
        for key, value in items:
            self.writeln(f"{INDENT * depth}{key}{INDENT}{value}")

    def contents(self) -> str:
        return "".join(self._parts)


@contextmanager
def open_script(path: Union[str, Path]) -> Iterator[ScriptWriter]:
    """
    Open a fresh file-backed writer for one generation pass.

    The file is removed again if the pass fails.
    """
    path = Path(path)
    f = open(path, "w", encoding="utf-8")
    try:
        with f:
            yield ScriptWriter(f)
    except Exception:
        # no half-written scripts
        path.unlink(missing_ok=True)
        raise
