"""Backup/restore guard around one smoke target directory.

On enter, a pre-existing package directory is renamed aside to a unique
backup path. On exit, whatever happened in between, a directory created by
the run is deleted and a displaced one is renamed back into place.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import TracebackType
from typing import Optional, Type, Union

from ..utils import console, is_child_of, remove_tree

BACKUP_MARKER = ".smoke-backup-"


@dataclass(frozen=True)
class Fresh:
    """Nothing existed at the target path; the run owns whatever appears there."""


@dataclass(frozen=True)
class BackedUp:
    """A pre-existing directory was moved to ``backup_path``."""

    backup_path: Path


@dataclass(frozen=True)
class Occupied:
    """A pre-existing directory could not be moved aside and must not be touched."""

    reason: str


TargetState = Union[Fresh, BackedUp, Occupied]


class CleanupResult(str, Enum):
    DELETED = "deleted"
    RESTORED = "restored"
    UNTOUCHED = "untouched"
    KEPT = "kept"
    FAILED = "failed"


def _exists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def backup_path_for(package_dir: Path) -> Path:
    """Return an unused ``<dir>.smoke-backup-<epoch ms>[-n]`` sibling path."""
    stem = f"{package_dir.name}{BACKUP_MARKER}{int(time.time() * 1000)}"
    candidate = package_dir.with_name(stem)
    counter = 1
    while _exists(candidate):
        candidate = package_dir.with_name(f"{stem}-{counter}")
        counter += 1
    return candidate


def back_up_existing(packages_dir: Path, package_dir: Path) -> TargetState:
    """Move a pre-existing ``package_dir`` aside and report the resulting state."""
    if not _exists(package_dir):
        return Fresh()

    name = package_dir.name
    if not is_child_of(package_dir, packages_dir):
        console.print(
            f"⚠️  Refusing to back up {package_dir}: not inside {packages_dir}",
            style="yellow",
        )
        return Occupied("path is outside the packages directory")

    backup_path = backup_path_for(package_dir)
    try:
        package_dir.rename(backup_path)
    except OSError as e:
        console.print(f"⚠️  Pre-backup failed for {name}: {e}", style="yellow")
        return Occupied(str(e))

    console.print(f"Pre-backed up existing {name} -> {backup_path.name}")
    return BackedUp(backup_path)


def restore(package_dir: Path, state: TargetState) -> CleanupResult:
    """Undo the run's effect on ``package_dir`` according to ``state``."""
    name = package_dir.name
    try:
        if isinstance(state, Fresh):
            if remove_tree(package_dir):
                console.print(f"🧹 Cleaned up created {name}")
                return CleanupResult.DELETED
            return CleanupResult.UNTOUCHED
        if isinstance(state, BackedUp):
            remove_tree(package_dir)
            state.backup_path.rename(package_dir)
            console.print(f"♻️  Restored backup for {name}")
            return CleanupResult.RESTORED
    except OSError as e:
        console.print(f"⚠️  Cleanup failed for {name}: {e}", style="yellow")
        return CleanupResult.FAILED
    return CleanupResult.UNTOUCHED


class StagedTarget:
    """Context manager owning one target directory for the duration of a smoke run.

    With ``clean=False`` the generated package and any backup are left on
    disk for inspection.
    """

    def __init__(self, packages_dir: Path, package_dir: Path, clean: bool = True) -> None:
        self.packages_dir = packages_dir
        self.package_dir = package_dir
        self.clean = clean
        self.state: TargetState = Fresh()
        self.cleanup = CleanupResult.KEPT

    def __enter__(self) -> "StagedTarget":
        self.state = back_up_existing(self.packages_dir, self.package_dir)
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self.clean:
            self.cleanup = restore(self.package_dir, self.state)
        elif isinstance(self.state, BackedUp):
            console.print(
                f"Leaving {self.package_dir.name} in place; original kept at "
                f"{self.state.backup_path.name}",
                style="yellow",
            )
