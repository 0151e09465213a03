"""Configuration management for pkgcreate."""

from .workspace import (
    CONFIG_RELATIVE_PATH,
    Workspace,
    WorkspaceConfig,
    discover_config_path,
    load_bundled_config,
    load_config,
    load_workspace,
)

__all__ = [
    "CONFIG_RELATIVE_PATH",
    "Workspace",
    "WorkspaceConfig",
    "discover_config_path",
    "load_bundled_config",
    "load_config",
    "load_workspace",
]
