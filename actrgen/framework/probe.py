"""
Runtime probe

Pre-flight checks run before anything is generated or executed. Every
failure is a PreflightError; none are retried.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional

from actrgen.errors import PreflightError

logger = logging.getLogger(__name__)


def check_for_executable(name: str) -> str:
    """Return the full path of an executable on PATH."""
    path = shutil.which(name)
    if path is None:
        raise PreflightError(f"could not find executable '{name}' - please ensure it is in your PATH")
    return path


def identify(framework_name: str, exe: str) -> str:
    """
    Describe which interpreter will be used.

    Returns:
        "<framework>: Using <version> from <path>"
    """
    result = subprocess.run([exe, "--version"], capture_output=True, text=True, errors="replace")
    version = (result.stdout + result.stderr).strip()

    path: Optional[str] = shutil.which(exe)
    identity = f"{framework_name}: Using {version} from {path or exe}"

    logger.info(identity)
    return identity


def check_for_package(package: str, interpreter: str = "python3") -> None:
    """Check the interpreter can import package."""
    result = subprocess.run(
        [interpreter, "-c", f"import {package}"],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise PreflightError(
            f"python package '{package}' not found. "
            f"Please ensure it is installed with pip or is in your PYTHONPATH env variable"
        )
