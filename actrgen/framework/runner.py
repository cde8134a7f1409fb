"""
Script runner

Runs a generated script with the interpreter and captures standard output
and standard error as one stream.

Key pieces:
- CommandResult: combined output plus exit status
- CommandRunner: the blocking subprocess boundary (swap it out in tests)
- strip_gui_warning: removes the banner pyactr prints without a GUI
- run_script: interpreter + script path -> output, or ExecutionError
"""

from __future__ import annotations

import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from actrgen.errors import ExecutionError

logger = logging.getLogger(__name__)

# pyactr warns on every run when its GUI is disabled; the banner ends with the
# source line of that warning.
GUI_WARNING_RE = re.compile(r'(?s).+warnings.warn\("Simulation GUI is set to False."\)(.+)')


@dataclass
class CommandResult:
    output: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Runs a command to completion and returns its combined output."""

    def run(self, args: List[str], timeout: Optional[float] = None) -> CommandResult:
        logger.info("Running %s", " ".join(args))
        completed = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
        return CommandResult(output=completed.stdout or "", returncode=completed.returncode)


def strip_gui_warning(text: str) -> str:
    """Keep only what follows the GUI warning banner, if it appears exactly once."""
    matches = GUI_WARNING_RE.findall(text)
    if len(matches) == 1:
        return matches[0].strip()
    return text


def run_script(script_path: Union[str, Path],
               interpreter: str = "python3",
               runner: Optional[CommandRunner] = None,
               timeout: Optional[float] = None) -> str:
    """
    Run a generated script.

    Returns:
        The captured output, unmodified

    Raises:
        ExecutionError: non-zero exit (carries the banner-stripped output)
            or timeout
    """
    runner = runner or CommandRunner()
    try:
        result = runner.run([interpreter, str(script_path)], timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise ExecutionError(f"{script_path} timed out after {timeout} seconds", returncode=-1) from e

    if not result.success:
        raise ExecutionError(strip_gui_warning(result.output), result.returncode)

    return result.output
