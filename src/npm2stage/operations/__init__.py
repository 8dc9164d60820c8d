"""High-level operations for npm2stage."""

from npm2stage.operations.install import install
from npm2stage.operations.shared import add_fault_message
from npm2stage.operations.shared import remove_added_items
from npm2stage.operations.shared import restore_backups
from npm2stage.operations.status import classify
from npm2stage.operations.status import get_status
from npm2stage.operations.uninstall import uninstall

__all__ = [
    "add_fault_message",
    "classify",
    "get_status",
    "install",
    "remove_added_items",
    "restore_backups",
    "uninstall",
]
