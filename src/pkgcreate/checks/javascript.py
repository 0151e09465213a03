"""JavaScript/TypeScript verification of a generated package."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from ..utils import console, run

CHECK_ORDER = ("install", "type_check", "test")


def run_package_checks(package_dir: Path, commands: Dict[str, List[str]]) -> None:
    """Install dependencies, type-check, then run tests inside ``package_dir``.

    Commands run strictly in that order; the first failure propagates as
    ``subprocess.CalledProcessError`` (or ``OSError`` if it cannot start).
    """
    console.print(f"Running package checks in {package_dir.name}...")
    for name in CHECK_ORDER:
        run(commands[name], cwd=package_dir)
    console.print(f"✓ {package_dir.name} checks passed", style="green")
