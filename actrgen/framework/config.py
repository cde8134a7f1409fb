"""Framework configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class FrameworkConfig:
    """Configuration for generating and running pyactr scripts."""
    interpreter: str = "python3"
    package: str = "pyactr"
    tmp_path: Path = field(default_factory=lambda: Path("tmp"))
    timeout: Optional[float] = None
