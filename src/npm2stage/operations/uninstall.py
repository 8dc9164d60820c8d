"""Uninstall operation."""

from pathlib import Path

from npm2stage.models import DEFAULT_MANIFEST
from npm2stage.models import Manifest
from npm2stage.operations.shared import locate_target
from npm2stage.operations.shared import remove_added_items
from npm2stage.operations.shared import restore_backups
from npm2stage.progress import ProgressCallback
from npm2stage.progress import emit
from npm2stage.target import NpmQuery


def uninstall(
    npm_path: Path | None = None,
    *,
    manifest: Manifest = DEFAULT_MANIFEST,
    query: NpmQuery | None = None,
    progress: ProgressCallback | None = None,
) -> None:
    """Remove all traces of npm-two-stage from an npm installation.

    Works on a partial installation too: whatever is already gone is
    reported and skipped.

    Args:
        npm_path: npm installation directory, or None for the global npm
        manifest: Names the files involved
        query: Asks the global npm about itself
        progress: Receives progress messages

    Raises:
        NoTargetError: If there is no npm at the target
        WrongVersionError: If the target npm is the wrong version
        BadInstallationError: If the target npm lib directory is inaccessible
        FsActionError: If an added item could not be removed, or a backup
            could not be restored
    """
    lib_dir = locate_target(npm_path, manifest, query, progress)

    emit(progress, "Removing items added by npm-two-stage install...")
    remove_added_items(lib_dir, manifest, progress)

    emit(progress, "Restoring backed-up original files...")
    restore_backups(lib_dir, manifest, progress)
