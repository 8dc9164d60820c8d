"""Filesystem operations for npm2stage."""

from npm2stage.files.discover import discover_tree
from npm2stage.files.tools import graft
from npm2stage.files.tools import prune
from npm2stage.files.tools import remove_files

__all__ = [
    "discover_tree",
    "graft",
    "prune",
    "remove_files",
]
