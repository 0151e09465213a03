"""Template catalog: which template files apply to a package kind.

The templates root is laid out as::

    common/README.md
    client/client-package.json   client/client-tsconfig.json
    client/src-index.tsx         client/src-component.tsx
    backend/backend-package.json backend/backend-tsconfig.json
    backend/backend-index.ts
    shared/shared-package.json   shared/shared-tsconfig.json
    shared/shared-index.ts       shared/shared-types.ts   shared/shared-utils.ts

plus an optional ``vitest.config.ts`` and ``test-setup.ts`` per kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from ..options import PackageOptions, PackageType


@dataclass(frozen=True)
class TemplateFile:
    source: Path
    destination: str
    is_template: bool


# (source file name, destination inside the package)
_SOURCE_FILES: Dict[PackageType, List[Tuple[str, str]]] = {
    PackageType.CLIENT: [
        ("src-index.tsx", "src/index.tsx"),
        ("src-component.tsx", "src/components/Widget.tsx"),
    ],
    PackageType.BACKEND: [
        ("backend-index.ts", "src/index.ts"),
    ],
    PackageType.SHARED: [
        ("shared-index.ts", "src/index.ts"),
        ("shared-types.ts", "src/types.ts"),
        ("shared-utils.ts", "src/utils.ts"),
    ],
}

# The client vitest config loads its setup file from test/.
_TEST_SETUP_DESTINATION: Dict[PackageType, str] = {
    PackageType.CLIENT: "test/test-setup.ts",
    PackageType.BACKEND: "test-setup.ts",
    PackageType.SHARED: "test-setup.ts",
}


def resolve_files(options: PackageOptions, templates_root: Path) -> List[TemplateFile]:
    """Return the ordered template files for ``options``.

    Sources are not checked for existence; a missing source surfaces later as
    a per-file failure during materialization.
    """
    kind = options.package_type
    kind_dir = templates_root / kind.value

    files: List[TemplateFile] = [
        TemplateFile(templates_root / "common" / "README.md", "README.md", True),
        TemplateFile(kind_dir / f"{kind.value}-package.json", "package.json", True),
        TemplateFile(kind_dir / f"{kind.value}-tsconfig.json", "tsconfig.json", True),
    ]
    for source_name, destination in _SOURCE_FILES[kind]:
        files.append(TemplateFile(kind_dir / source_name, destination, True))

    if options.include_tests:
        files.append(TemplateFile(kind_dir / "vitest.config.ts", "vitest.config.ts", False))
        files.append(
            TemplateFile(kind_dir / "test-setup.ts", _TEST_SETUP_DESTINATION[kind], False)
        )
    return files


def required_templates(templates_root: Path) -> List[Path]:
    """Every template source a package of any kind needs, without test setup."""
    required: List[Path] = []
    for kind in PackageType:
        probe = PackageOptions(package_name=f"probe-{kind.value}", package_type=kind)
        for template_file in resolve_files(probe, templates_root):
            if template_file.source not in required:
                required.append(template_file.source)
    return required
