"""
pyactr script assembly

Writes a complete, runnable pyactr program for a Model in a fixed order:
1. regenerate warning and model description
2. import line
3. model constructor (subsymbolic, then optional latency/threshold)
4. chunk type declarations (internal chunks skipped)
5. dm / goal aliases
6. optional initial goal
7. optional imaginal buffer
8. initializers (goal initializer suppressed by an explicit initial goal)
9. productions
10. simulation harness
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from actrgen import __version__
from actrgen.emitter.matches import emit_match
from actrgen.emitter.patterns import emit_pattern
from actrgen.emitter.statements import emit_statement
from actrgen.emitter.values import format_float
from actrgen.emitter.writer import INDENT, ScriptWriter, open_script
from actrgen.errors import ConfigurationError
from actrgen.model.model import Model, Pattern, Production

logger = logging.getLogger(__name__)

CLASS_PREFIX = "actrgen_pyactr_"
GOAL_BUFFER = "goal"
MEMORY_ALIAS = "dm"


def title_case(name: str) -> str:
    """Upper-case the first letter of each word, leaving the rest alone."""
    return re.sub(r"(^|[^0-9A-Za-z_])([a-z])", lambda m: m.group(1) + m.group(2).upper(), name)


def class_name_for(model: Model) -> str:
    return CLASS_PREFIX + title_case(model.name)


def write_comment(writer: ScriptWriter, text: str) -> None:
    """Write text as comment lines, one per source line."""
    for line in text.splitlines() or [""]:
        writer.writeln(f"# {line}")


def model_init_args(model: Model) -> List[str]:
    """Constructor arguments; optional ones are omitted, never defaulted."""
    args = ["subsymbolic=True"]

    memory = model.memory
    if memory.latency is not None:
        args.append(f"latency_factor={format_float(memory.latency)}")
    if memory.threshold is not None:
        args.append(f"retrieval_threshold={format_float(memory.threshold)}")

    return args


class ScriptAssembler:
    """Generates one pyactr script for one model."""

    def __init__(self, model: Model):
        if not model.name:
            raise ConfigurationError("model is missing name")

        self.model = model
        self.class_name = class_name_for(model)

        # the class name doubles as a Python variable and the script file name
        if not self.class_name.isidentifier():
            raise ConfigurationError(f"model name '{model.name}' is not a valid identifier")

    def write(self, writer: ScriptWriter,
              initial_goal: Optional[Pattern] = None,
              generated_at: Optional[datetime] = None) -> None:
        """Write the whole script through writer."""
        generated_at = generated_at or datetime.now()

        self._write_header(writer, generated_at)
        self._write_model(writer)
        self._write_aliases(writer, initial_goal)
        self._write_initializers(writer, initial_goal)

        for production in self.model.productions:
            self._write_production(writer, production)
        writer.writeln()

        self._write_harness(writer)

    def write_file(self, path: Union[str, Path],
                   initial_goal: Optional[Pattern] = None,
                   generated_at: Optional[datetime] = None) -> str:
        """Write the script to path and return the generated text."""
        logger.debug("Writing %s to %s", self.class_name, path)

        with open_script(path) as writer:
            self.write(writer, initial_goal, generated_at)
            return writer.contents()

    def _write_header(self, writer: ScriptWriter, generated_at: datetime) -> None:
        writer.writeln(f"# This file is generated by actrgen {__version__} "
                       f"{generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
        writer.writeln()
        writer.writeln("# *** This is a generated file. Any changes may be overwritten.")
        writer.writeln()
        write_comment(writer, self.model.description)
        writer.writeln()

    def _write_model(self, writer: ScriptWriter) -> None:
        writer.write("import pyactr as actr\n\n")

        args = ", ".join(model_init_args(self.model))
        writer.write(f"{self.class_name} = actr.ACTRModel({args})\n\n")

        for chunk in self.model.chunks:
            if chunk.internal:
                continue
            writer.writeln(f"actr.chunktype('{chunk.name}', '{', '.join(chunk.slot_names)}')")
        writer.writeln()

    def _write_aliases(self, writer: ScriptWriter, initial_goal: Optional[Pattern]) -> None:
        writer.writeln(f"{MEMORY_ALIAS} = {self.class_name}.decmem")
        writer.writeln(f"{GOAL_BUFFER} = {self.class_name}.set_goal('{GOAL_BUFFER}')")
        writer.writeln()

        if initial_goal is not None:
            writer.writeln("initial_goal = actr.chunkstring(string='''")
            emit_pattern(writer, initial_goal, 1)
            writer.writeln("''')")
            writer.writeln(f"{GOAL_BUFFER}.add(initial_goal)")
            writer.writeln()

        imaginal = self.model.imaginal
        if imaginal is not None:
            writer.writeln(f'{imaginal.name} = {self.class_name}.set_goal('
                           f'name="{imaginal.name}", delay={format_float(imaginal.imaginal_delay)})')
            writer.writeln()

    def _write_initializers(self, writer: ScriptWriter, initial_goal: Optional[Pattern]) -> None:
        for init in self.model.initializers:
            target = MEMORY_ALIAS
            if init.buffer is not None:
                target = init.buffer.name

                # an explicit initial goal takes precedence
                if target == GOAL_BUFFER and initial_goal is not None:
                    logger.debug("Initial goal overrides goal initializer")
                    continue

            writer.writeln(f"{target}.add(actr.chunkstring(string='''")
            emit_pattern(writer, init.pattern, 1)
            writer.writeln("'''))")

        writer.writeln()

    def _write_production(self, writer: ScriptWriter, production: Production) -> None:
        if production.description is not None:
            write_comment(writer, production.description)

        writer.writeln(f"{self.class_name}.productionstring(name='{production.name}', string='''")
        for match in production.matches:
            emit_match(writer, match)

        writer.writeln(f"{INDENT}==>")

        for statement in production.statements:
            emit_statement(writer, statement)

        writer.write("''')\n\n")

    def _write_harness(self, writer: ScriptWriter) -> None:
        writer.writeln("if __name__ == '__main__':")
        writer.writeln(f"{INDENT}sim = {self.class_name}.simulation()")
        writer.writeln(f"{INDENT}sim.run()")
        writer.writeln(f"{INDENT}if {GOAL_BUFFER}.test_buffer('full') == True:")
        writer.writeln(f"{INDENT}{INDENT}print( 'final goal: ' + str({GOAL_BUFFER}.pop()) )")
