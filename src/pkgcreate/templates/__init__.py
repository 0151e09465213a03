"""Template catalog, substitution and materialization for pkgcreate."""

from .catalog import TemplateFile, required_templates, resolve_files
from .manager import create_package, ensure_templates_root
from .materializer import FileOutcome, materialize
from .substitution import read_workspace_name, substitute
from .validation import check_templates, find_missing_templates

__all__ = [
    "TemplateFile",
    "required_templates",
    "resolve_files",
    "create_package",
    "ensure_templates_root",
    "FileOutcome",
    "materialize",
    "read_workspace_name",
    "substitute",
    "check_templates",
    "find_missing_templates",
]
