"""
actrgen framework

Runtime side of the compiler:
- config: FrameworkConfig (interpreter, package, tmp dir, timeout)
- probe: pre-flight checks for the interpreter and the pyactr package
- runner: subprocess boundary and output clean-up
- pyactr: PyACTR facade tying generation and execution together
"""

from actrgen.framework.config import FrameworkConfig
from actrgen.framework.probe import check_for_executable, check_for_package, identify
from actrgen.framework.runner import (
    CommandResult,
    CommandRunner,
    run_script,
    strip_gui_warning,
)
from actrgen.framework.pyactr import PyACTR, RunResult, parse_initial_buffers, parse_initial_goal

__all__ = [
    "FrameworkConfig",
    "check_for_executable",
    "check_for_package",
    "identify",
    "CommandResult",
    "CommandRunner",
    "run_script",
    "strip_gui_warning",
    "PyACTR",
    "RunResult",
    "parse_initial_buffers",
    "parse_initial_goal",
]
