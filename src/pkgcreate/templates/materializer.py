"""Write resolved template files into a new package directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ..errors import PackageExistsError
from ..options import PackageOptions
from ..utils import console, is_child_of
from .catalog import TemplateFile
from .substitution import DEFAULT_WORKSPACE_NAME, substitute


@dataclass
class FileOutcome:
    destination: str
    written: bool
    error: Optional[str] = None


def materialize(
    destination_root: Path,
    files: Iterable[TemplateFile],
    options: PackageOptions,
    workspace: str = DEFAULT_WORKSPACE_NAME,
) -> List[FileOutcome]:
    """Create ``destination_root`` and write every template file into it.

    Raises ``PackageExistsError`` before touching the filesystem if the
    destination already exists. Individual file failures are reported as
    warnings and in the returned outcomes; they never abort the remaining files.
    """
    if destination_root.exists():
        raise PackageExistsError(
            f"Package directory '{destination_root.name}' already exists!"
        )

    packages_root = destination_root.parent
    if not packages_root.exists():
        packages_root.mkdir(parents=True, exist_ok=True)
        console.print("📁 Created packages directory")

    destination_root.mkdir()
    console.print(f"📁 Created package directory: {destination_root.name}")

    outcomes: List[FileOutcome] = []
    for template_file in files:
        outcomes.append(_write_file(destination_root, template_file, options, workspace))
    return outcomes


def _write_file(
    destination_root: Path,
    template_file: TemplateFile,
    options: PackageOptions,
    workspace: str,
) -> FileOutcome:
    dest_path = destination_root / template_file.destination
    if not is_child_of(dest_path, destination_root):
        console.print(
            f"⚠️  Warning: Refusing to write {template_file.destination} outside the package",
            style="yellow",
        )
        return FileOutcome(template_file.destination, False, "destination escapes package")

    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        if template_file.is_template:
            content = template_file.source.read_text(encoding="utf-8")
            dest_path.write_text(substitute(content, options, workspace), encoding="utf-8")
        else:
            dest_path.write_bytes(template_file.source.read_bytes())
    except (OSError, UnicodeDecodeError) as e:
        console.print(
            f"⚠️  Warning: Could not create {template_file.destination} - template file may be missing",
            style="yellow",
        )
        return FileOutcome(template_file.destination, False, str(e))

    console.print(f"📄 Created: {template_file.destination}")
    return FileOutcome(template_file.destination, True)
