"""File system utilities."""

from __future__ import annotations

import shutil
from pathlib import Path


def is_child_of(path: Path, root: Path) -> bool:
    """Return True if ``path`` lies strictly below ``root`` once both are resolved."""
    resolved = path.resolve()
    resolved_root = root.resolve()
    return resolved != resolved_root and resolved.is_relative_to(resolved_root)


def remove_tree(path: Path) -> bool:
    """Recursively delete ``path`` if it exists. Returns whether anything was removed."""
    if not path.exists() and not path.is_symlink():
        return False
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    return True
