"""Template validation utilities."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from .catalog import required_templates


def check_templates(templates_root: Path) -> List[Tuple[Path, bool]]:
    """Return each required template source paired with whether it exists."""
    return [(path, path.is_file()) for path in required_templates(templates_root)]


def find_missing_templates(templates_root: Path) -> List[Path]:
    """Return the required template sources that are absent."""
    return [path for path, present in check_templates(templates_root) if not present]
