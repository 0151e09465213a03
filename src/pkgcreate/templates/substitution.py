"""Placeholder substitution for template files.

Placeholders are literal ``{{name}}`` tokens. All recognized tokens are
replaced in a single pass, so a replacement value is never itself rescanned;
unknown tokens are left untouched.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict

from ..options import PackageOptions, PackageType

DEFAULT_WORKSPACE_NAME = "workspace"

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")

SCRIPTS_DOCUMENTATION: Dict[PackageType, str] = {
    PackageType.CLIENT: """- `yarn dev` - Start development server
- `yarn build` - Build for production
- `yarn preview` - Preview production build
- `yarn lint` - Run ESLint
- `yarn type-check` - Run TypeScript type checking""",
    PackageType.BACKEND: """- `yarn dev` - Start development server with hot reload
- `yarn build` - Build TypeScript to JavaScript
- `yarn start` - Start production server
- `yarn lint` - Run ESLint
- `yarn type-check` - Run TypeScript type checking""",
    PackageType.SHARED: """- `yarn build` - Build TypeScript library
- `yarn dev` - Build in watch mode
- `yarn lint` - Run ESLint
- `yarn type-check` - Run TypeScript type checking""",
}

_DEV_INSTRUCTIONS_TAIL: Dict[PackageType, str] = {
    PackageType.CLIENT: "This will start the Vite development server with hot module replacement.",
    PackageType.BACKEND: "This will start the server with hot reload using tsx watch.",
    PackageType.SHARED: "This will build the library in watch mode for development.",
}


def dev_instructions(package_type: PackageType) -> str:
    """Getting-started prose for the generated README."""
    return (
        "To start developing:\n\n```bash\nyarn dev\n```\n\n"
        + _DEV_INSTRUCTIONS_TAIL[package_type]
    )


def read_workspace_name(workspace_root: Path) -> str:
    """Return the ``name`` of the workspace's package.json, or the fallback."""
    try:
        with open(workspace_root / "package.json", "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return DEFAULT_WORKSPACE_NAME
    name = data.get("name") if isinstance(data, dict) else None
    if isinstance(name, str) and name:
        return name
    return DEFAULT_WORKSPACE_NAME


def template_variables(
    options: PackageOptions, workspace: str = DEFAULT_WORKSPACE_NAME
) -> Dict[str, str]:
    """Map each recognized placeholder name to its replacement value."""
    return {
        "packageName": options.package_name,
        "directoryName": options.directory_name,
        "description": options.description,
        "author": options.author,
        "workspace": workspace,
        "scripts": SCRIPTS_DOCUMENTATION[options.package_type],
        "devInstructions": dev_instructions(options.package_type),
    }


def substitute(
    raw_text: str, options: PackageOptions, workspace: str = DEFAULT_WORKSPACE_NAME
) -> str:
    """Replace every recognized placeholder in ``raw_text``."""
    variables = template_variables(options, workspace)

    def _replace(match: re.Match[str]) -> str:
        return variables.get(match.group(1), match.group(0))

    return PLACEHOLDER_RE.sub(_replace, raw_text)
