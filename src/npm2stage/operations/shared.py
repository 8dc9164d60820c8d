"""Steps shared by install, uninstall and status."""

import errno
import os
from pathlib import Path

from npm2stage.exceptions import BadInstallationError
from npm2stage.exceptions import FsActionError
from npm2stage.exceptions import NoTargetError
from npm2stage.exceptions import Npm2StageError
from npm2stage.exceptions import WrongVersionError
from npm2stage.files import prune
from npm2stage.files import remove_files
from npm2stage.models import Manifest
from npm2stage.progress import ProgressCallback
from npm2stage.progress import emit
from npm2stage.target import NpmQuery
from npm2stage.target import expect_correct_npm_version
from npm2stage.target import get_lib_dir


def add_fault_message(error: Exception, progress: ProgressCallback | None) -> None:
    """Report a failed npm check in terms a user can act on."""
    if isinstance(error, WrongVersionError):
        emit(progress, "Wrong version of npm for this version of npm-two-stage.")
    elif isinstance(error, NoTargetError):
        emit(progress, "npm not found at given location.")
    elif isinstance(error, BadInstallationError):
        emit(progress, str(error))


def locate_target(
    npm_path: Path | None,
    manifest: Manifest,
    query: NpmQuery | None,
    progress: ProgressCallback | None,
) -> Path:
    """Verify the npm installation and get its lib directory.

    Args:
        npm_path: npm installation directory, or None for the global npm
        manifest: Names the package and version expected
        query: Asks the global npm about itself. Defaults to NpmQuery().
        progress: Receives progress messages

    Returns:
        Absolute path to the lib directory of the npm installation

    Raises:
        NoTargetError, WrongVersionError, BadInstallationError: From the
            version check, or if lib cannot be accessed
    """
    if query is None:
        query = NpmQuery()

    if npm_path is None:
        emit(progress, "Checking version of global npm...")
    else:
        emit(progress, "Checking npm version at given path...")

    try:
        expect_correct_npm_version(npm_path, manifest, query)
        npm_dir = query.npm_dir() if npm_path is None else Path(npm_path)
    except Npm2StageError as e:
        add_fault_message(e, progress)
        raise

    npm_dir = npm_dir.resolve()
    emit(progress, f"Target npm home is {npm_dir}")

    try:
        return get_lib_dir(npm_dir)
    except BadInstallationError as e:
        emit(progress, str(e))
        raise


def remove_added_items(
    lib_dir: Path, manifest: Manifest, progress: ProgressCallback | None = None
) -> None:
    """Remove the files and directories npm-two-stage adds.

    Items that are already gone are reported but are not an error.

    Raises:
        FsActionError: If any item exists but cannot be removed
    """
    added_files = [lib_dir / manifest.file_path(name) for name in manifest.added_files]
    if added_files:
        try:
            remove_files(added_files, progress)
        except OSError as e:
            emit(progress, f"Unable to remove file: {e}")
            raise FsActionError(str(e)) from e

    for name in manifest.added_dirs:
        dir_path = lib_dir / name
        try:
            prune(dir_path)
        except FileNotFoundError:
            emit(progress, f"Could not find directory {dir_path} for removal")
        except OSError as e:
            emit(progress, f"Unable to remove directory {dir_path}: {e}")
            raise FsActionError(str(e)) from e


def restore_backups(
    lib_dir: Path, manifest: Manifest, progress: ProgressCallback | None = None
) -> None:
    """Put every backed-up original back under its own name.

    Whatever occupies the original name is replaced. Every backup is tried
    even after a failure, and each failure is reported.

    Raises:
        FsActionError: For the first backup that could not be restored
    """
    first_error = None
    for name in manifest.changed_files:
        backup = lib_dir / manifest.backup_path(name)
        original = lib_dir / manifest.file_path(name)
        try:
            if backup.exists() and not os.access(backup, os.R_OK):
                raise PermissionError(
                    errno.EACCES, os.strerror(errno.EACCES), str(backup)
                )
            backup.replace(original)
        except OSError as e:
            emit(progress, f"Unable to restore {original}: {e}")
            if first_error is None:
                first_error = e

    if first_error is not None:
        raise FsActionError(str(first_error)) from first_error
