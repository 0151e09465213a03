from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest

from pkgcreate.config import Workspace
from pkgcreate.config.workspace import BUNDLED_TEMPLATES_ROOT

COMMANDS = {
    "install": ["yarn", "install"],
    "type_check": ["yarn", "type-check"],
    "test": ["yarn", "test", "--silent", "--run"],
}


def snapshot(directory: Path) -> Dict[str, bytes]:
    """Map every file under ``directory`` to its bytes, keyed by relative path."""
    return {
        p.relative_to(directory).as_posix(): p.read_bytes()
        for p in sorted(directory.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    packages_dir = tmp_path / "packages"
    packages_dir.mkdir()
    (tmp_path / "package.json").write_text('{"name": "acme-monorepo"}', encoding="utf-8")
    return Workspace(
        root=tmp_path,
        packages_dir=packages_dir,
        templates_root=BUNDLED_TEMPLATES_ROOT,
        commands=dict(COMMANDS),
    )
