"""Utility modules for pkgcreate."""

from .console import console
from .filesystem import is_child_of, remove_tree
from .subprocess_utils import run

__all__ = ["console", "is_child_of", "remove_tree", "run"]
