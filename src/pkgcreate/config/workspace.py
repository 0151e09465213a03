"""Workspace configuration discovery.

- Discover the workspace by walking up from a start directory, looking for
  `.github/create-package.yml`; the directory holding `.github/` is the root.
- If not found, the start directory is the root and only the bundled
  defaults apply.
- Values from the workspace file are layered over the bundled
  `create-package.yml` shipped with this package.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict

import yaml

from ..errors import ConfigError

CONFIG_RELATIVE_PATH = Path(".github") / "create-package.yml"
COMMAND_NAMES = ("install", "type_check", "test")
BUNDLED_TEMPLATES_ROOT = Path(__file__).resolve().parent.parent / "templates" / "files"


class CommandsConfig(TypedDict):
    install: str
    type_check: str
    test: str


class WorkspaceConfig(TypedDict):
    packages_dir: str
    templates_dir: Optional[str]
    commands: CommandsConfig


@dataclass(frozen=True)
class Workspace:
    """A resolved workspace: absolute paths plus the verification commands."""

    root: Path
    packages_dir: Path
    templates_root: Path
    commands: Dict[str, List[str]]
    config_path: Optional[Path] = None


def _parse_config_dict(data: Dict[str, Any], base: WorkspaceConfig) -> WorkspaceConfig:
    packages_dir = data.get("packages_dir", base["packages_dir"])
    if not isinstance(packages_dir, str) or not packages_dir:
        raise ConfigError("'packages_dir' must be a non-empty string")

    templates_dir = data.get("templates_dir", base["templates_dir"])
    if templates_dir is not None and not isinstance(templates_dir, str):
        raise ConfigError("'templates_dir' must be a string")

    commands_section = data.get("commands") or {}
    if not isinstance(commands_section, dict):
        raise ConfigError("'commands' must be a mapping")
    commands = CommandsConfig(**base["commands"])
    for name in COMMAND_NAMES:
        value = commands_section.get(name, commands[name])
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"'commands.{name}' must be a non-empty string")
        commands[name] = value  # type: ignore[literal-required]

    return WorkspaceConfig(
        packages_dir=packages_dir,
        templates_dir=templates_dir,
        commands=commands,
    )


def _read_yaml(text: str, source: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {source}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must contain a mapping")
    return data


@lru_cache(maxsize=1)
def load_bundled_config() -> WorkspaceConfig:
    """Load the default configuration shipped with the package."""
    content = files("pkgcreate.config").joinpath("create-package.yml").read_text(
        encoding="utf-8"
    )
    empty = WorkspaceConfig(
        packages_dir="packages",
        templates_dir=None,
        commands=CommandsConfig(install="", type_check="", test=""),
    )
    return _parse_config_dict(_read_yaml(content, "bundled create-package.yml"), empty)


def load_config(path: Path) -> WorkspaceConfig:
    """Load a workspace configuration file layered over the bundled defaults."""
    with path.open("r", encoding="utf-8") as f:
        data = _read_yaml(f.read(), str(path))
    return _parse_config_dict(data, load_bundled_config())


def discover_config_path(start: Path) -> Optional[Path]:
    """Return the nearest `.github/create-package.yml` at or above ``start``."""
    here = start.resolve()
    for parent in (here, *here.parents):
        candidate = parent / CONFIG_RELATIVE_PATH
        if candidate.is_file():
            return candidate
    return None


def load_workspace(start: Optional[Path] = None) -> Workspace:
    """Discover and resolve the workspace containing ``start`` (default: CWD)."""
    start_dir = (start or Path.cwd()).resolve()
    config_path = discover_config_path(start_dir)
    if config_path is not None:
        root = config_path.parent.parent
        config = load_config(config_path)
    else:
        root = start_dir
        config = load_bundled_config()

    templates_root = (
        root / config["templates_dir"]
        if config["templates_dir"]
        else BUNDLED_TEMPLATES_ROOT
    )
    commands = {
        name: shlex.split(config["commands"][name])  # type: ignore[literal-required]
        for name in COMMAND_NAMES
    }
    return Workspace(
        root=root,
        packages_dir=root / config["packages_dir"],
        templates_root=templates_root,
        commands=commands,
        config_path=config_path,
    )
