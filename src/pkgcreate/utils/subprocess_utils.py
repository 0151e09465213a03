"""Subprocess utilities for running commands."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from .console import console


def run(command: List[str], cwd: Optional[Path] = None) -> None:
    """Run a command with inherited stdio, blocking until it exits.

    Raises ``subprocess.CalledProcessError`` on a non-zero exit and ``OSError``
    when the executable cannot be started.
    """
    console.print(f"> {shlex.join(command)}", style="dim")
    subprocess.run(command, cwd=str(cwd) if cwd else None, check=True)
