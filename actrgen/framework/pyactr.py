"""
pyactr framework

Generates a pyactr script for a model and runs it.

Typical use:

    framework = PyACTR()
    framework.initialize()
    framework.set_model(model)
    result = framework.run("[countFrom: 2 5 starting]")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Tuple, Union

from actrgen.amod.parser import parse_chunk
from actrgen.emitter.script import GOAL_BUFFER, ScriptAssembler
from actrgen.errors import (
    BufferNotFoundError,
    ChunkParseError,
    ConfigurationError,
)
from actrgen.framework.config import FrameworkConfig
from actrgen.framework.probe import check_for_executable, check_for_package, identify
from actrgen.framework.runner import CommandRunner, run_script
from actrgen.model.model import Model, Pattern

logger = logging.getLogger(__name__)

FRAMEWORK_NAME = "pyactr"

ChunkParser = Callable[[Model, str], Optional[Pattern]]


@dataclass
class RunResult:
    """Outcome of a successful run."""
    output: str
    generated_code: str
    script_path: Path


def parse_initial_buffers(model: Model,
                          initial_buffers: Mapping[str, str],
                          parser: ChunkParser = parse_chunk) -> Dict[str, Pattern]:
    """
    Parse initial buffer contents against a model.

    Args:
        model: Model declaring the buffers and chunk types
        initial_buffers: buffer name -> chunk text

    Returns:
        buffer name -> Pattern (empty texts are left out)

    Raises:
        BufferNotFoundError: buffer is not part of the model
        ChunkParseError: chunk text failed to parse
    """
    parsed: Dict[str, Pattern] = {}

    for buffer_name, text in initial_buffers.items():
        if model.lookup_buffer(buffer_name) is None:
            raise BufferNotFoundError(buffer_name, model.name)

        try:
            pattern = parser(model, text)
        except ChunkParseError as e:
            raise ChunkParseError(f"error in initial buffer '{buffer_name}' - {e}") from e

        if pattern is not None:
            parsed[buffer_name] = pattern

    return parsed


def parse_initial_goal(model: Model,
                       initial_goal: Optional[str],
                       parser: ChunkParser = parse_chunk) -> Optional[Pattern]:
    """Parse the initial goal text; empty or missing text means no goal."""
    try:
        return parser(model, initial_goal or "")
    except ChunkParseError as e:
        raise ChunkParseError(f"error in initial goal - {e}") from e


class PyACTR:
    """Generates and runs pyactr scripts."""

    def __init__(self,
                 config: Optional[FrameworkConfig] = None,
                 runner: Optional[CommandRunner] = None,
                 parser: ChunkParser = parse_chunk):
        self.config = config or FrameworkConfig()
        self.runner = runner or CommandRunner()
        self.parser = parser
        self.model: Optional[Model] = None
        self.class_name = ""

    def initialize(self) -> str:
        """
        Check the interpreter and the pyactr package, then create the tmp dir.

        Returns:
            The interpreter identity line
        """
        check_for_executable(self.config.interpreter)
        identity = identify(FRAMEWORK_NAME, self.config.interpreter)
        check_for_package(self.config.package, self.config.interpreter)

        self.config.tmp_path.mkdir(parents=True, exist_ok=True)
        return identity

    def set_model(self, model: Model) -> None:
        """Raises ConfigurationError for a missing or unusable model name."""
        self.class_name = ScriptAssembler(model).class_name
        self.model = model

    def _require_model(self) -> Model:
        if self.model is None:
            raise ConfigurationError("no model set")
        return self.model

    def parse_initial_goal(self, initial_goal: Optional[str]) -> Optional[Pattern]:
        return parse_initial_goal(self._require_model(), initial_goal, self.parser)

    def write_model(self, path: Union[str, Path, None] = None,
                    initial_goal: Optional[str] = None) -> Path:
        """Write the script into directory path and return the file path."""
        path, _ = self._write(path, self.parse_initial_goal(initial_goal))
        return path

    def _write(self, path: Union[str, Path, None],
               goal: Optional[Pattern]) -> Tuple[Path, str]:
        model = self._require_model()

        directory = Path(path) if path is not None else self.config.tmp_path
        output_file = directory / f"{self.class_name}.py"

        code = ScriptAssembler(model).write_file(output_file, goal)
        return output_file, code

    def run(self, initial_goal: Optional[str] = None,
            initial_buffers: Optional[Mapping[str, str]] = None) -> RunResult:
        """
        Generate the script into the tmp dir and run it.

        An explicit initial_goal wins over a goal entry in initial_buffers.

        Raises:
            ConfigurationError: no model, or an initial buffer other than goal
            BufferNotFoundError / ChunkParseError: bad initial buffers
            ExecutionError: the script exited with a non-zero status
        """
        model = self._require_model()

        goal = self.parse_initial_goal(initial_goal)
        if initial_buffers:
            parsed = parse_initial_buffers(model, initial_buffers, self.parser)
            unsupported = sorted(name for name in parsed if name != GOAL_BUFFER)
            if unsupported:
                raise ConfigurationError(
                    f"{FRAMEWORK_NAME} can only initialize the goal buffer, got: {', '.join(unsupported)}"
                )
            if goal is None:
                goal = parsed.get(GOAL_BUFFER)

        script_path, code = self._write(self.config.tmp_path, goal)
        logger.debug("Generated %s", script_path)

        output = run_script(
            script_path,
            interpreter=self.config.interpreter,
            runner=self.runner,
            timeout=self.config.timeout,
        )

        return RunResult(output=output, generated_code=code, script_path=script_path)
