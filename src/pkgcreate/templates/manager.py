"""High-level template management operations."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..config import Workspace
from ..errors import TemplatesRootError
from ..options import PackageOptions, PackageType
from ..utils import console
from .catalog import resolve_files
from .materializer import FileOutcome, materialize
from .substitution import read_workspace_name


def ensure_templates_root(templates_root: Path) -> None:
    """Fail fast when the templates root is not a readable directory."""
    if not templates_root.is_dir():
        raise TemplatesRootError(f"Templates directory not found: {templates_root}")


def create_package(options: PackageOptions, workspace: Workspace) -> List[FileOutcome]:
    """Generate a new package under the workspace's packages directory.

    Raises ``PackageExistsError`` if the package directory already exists.
    """
    ensure_templates_root(workspace.templates_root)
    package_dir = workspace.packages_dir / options.directory_name
    outcomes = materialize(
        package_dir,
        resolve_files(options, workspace.templates_root),
        options,
        workspace=read_workspace_name(workspace.root),
    )

    relative_dir = _display_path(package_dir, workspace.root)
    console.print(
        f"\n✅ Package '{options.package_name}' created successfully!", style="bold green"
    )
    console.print(f"📍 Location: {relative_dir}")
    console.print("\nNext steps:")
    console.print(f"1. cd {relative_dir}")
    console.print("2. yarn install")
    if options.package_type is PackageType.SHARED:
        console.print("3. yarn build (to build the library)")
    else:
        console.print("3. yarn dev (to start development server)")
    return outcomes


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
