"""Install operation."""

import logging
import shutil
from pathlib import Path

from npm2stage.exceptions import BadInstallationError
from npm2stage.exceptions import BadProjectError
from npm2stage.exceptions import FsActionError
from npm2stage.exceptions import LeftoversError
from npm2stage.files import graft
from npm2stage.models import DEFAULT_MANIFEST
from npm2stage.models import Manifest
from npm2stage.operations.shared import locate_target
from npm2stage.operations.shared import restore_backups
from npm2stage.progress import ProgressCallback
from npm2stage.progress import emit
from npm2stage.state import probe
from npm2stage.target import NpmQuery

logger = logging.getLogger(__name__)


def check_for_leftovers(lib_dir: Path, manifest: Manifest) -> None:
    """Make sure nothing from an earlier installation is in the way.

    Raises:
        LeftoversError: If any backup or added file/directory exists
    """
    leftovers = probe(lib_dir, manifest).leftovers
    if leftovers:
        raise LeftoversError(leftovers)


def check_preconditions(lib_dir: Path, source_dir: Path, manifest: Manifest) -> None:
    """Make sure everything needed for the installation is at hand.

    Raises:
        BadInstallationError: If a file to be replaced is missing from npm
        BadProjectError: If a file or directory to install is missing from
            source_dir
    """
    for name in manifest.changed_files:
        path = lib_dir / manifest.file_path(name)
        if not path.is_file():
            raise BadInstallationError(f"Expected file not found in npm: {path}")

    for name in manifest.changed_files + manifest.added_files:
        path = source_dir / manifest.file_path(name)
        if not path.is_file():
            raise BadProjectError(f"npm-two-stage source file is missing: {path}")
    for name in manifest.added_dirs:
        path = source_dir / name
        if not path.is_dir():
            raise BadProjectError(f"npm-two-stage source directory is missing: {path}")


def back_up_originals(
    lib_dir: Path, manifest: Manifest, progress: ProgressCallback | None = None
) -> None:
    """Rename each file to be replaced to its backup name.

    If any rename fails, the renames already done are reversed before the
    error is raised.

    Raises:
        BadInstallationError: If a file to be renamed has disappeared
        FsActionError: If a rename fails for any other reason, or if the
            original names could not all be restored
    """
    emit(
        progress,
        f"Backing up files to be replaced: {', '.join(manifest.changed_files)}",
    )

    renamed: list[str] = []
    try:
        for name in manifest.changed_files:
            original = lib_dir / manifest.file_path(name)
            original.rename(lib_dir / manifest.backup_path(name))
            renamed.append(name)
    except OSError as e:
        emit(progress, "Error while renaming files; restoring original names...")
        _undo_renames(lib_dir, manifest, renamed, progress)
        emit(progress, str(e))
        if isinstance(e, FileNotFoundError):
            raise BadInstallationError(str(e)) from e
        raise FsActionError(str(e)) from e


def _undo_renames(
    lib_dir: Path,
    manifest: Manifest,
    renamed: list[str],
    progress: ProgressCallback | None,
) -> None:
    failed = []
    for name in reversed(renamed):
        backup = lib_dir / manifest.backup_path(name)
        try:
            backup.rename(lib_dir / manifest.file_path(name))
        except OSError as e:
            emit(progress, f"Unable to restore original name of {backup}: {e}")
            failed.append(str(backup))

    if failed:
        raise FsActionError(
            f"Could not restore original names of {', '.join(failed)}; "
            "rename them by hand, removing the backup suffix"
        )


def copy_in(
    lib_dir: Path,
    source_dir: Path,
    manifest: Manifest,
    progress: ProgressCallback | None = None,
) -> None:
    """Copy the npm-two-stage files and directories into lib_dir.

    Raises:
        OSError: On the first failure. Items copied before it are left
            in place.
    """
    emit(progress, f"Copying into target directory: {lib_dir}")

    for name in manifest.changed_files + manifest.added_files:
        rel_path = manifest.file_path(name)
        dest = lib_dir / rel_path
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source_dir / rel_path, dest)

    for name in manifest.added_dirs:
        dest_parent = (lib_dir / name).parent
        dest_parent.mkdir(parents=True, exist_ok=True)
        graft(source_dir / name, dest_parent, progress)


def install(
    npm_path: Path | None = None,
    *,
    source_dir: Path,
    manifest: Manifest = DEFAULT_MANIFEST,
    query: NpmQuery | None = None,
    progress: ProgressCallback | None = None,
) -> None:
    """Install npm-two-stage over an npm installation.

    Args:
        npm_path: npm installation directory, or None for the global npm
        source_dir: Directory holding the npm-two-stage files to install
        manifest: Names the files involved
        query: Asks the global npm about itself
        progress: Receives progress messages

    Raises:
        NoTargetError: If there is no npm at the target
        WrongVersionError: If the target npm is the wrong version
        BadInstallationError: If the target npm is damaged or inaccessible
            (the target is unchanged)
        BadProjectError: If source_dir is incomplete (the target is unchanged)
        LeftoversError: If remains of a previous installation exist (the
            target is unchanged)
        FsActionError: If a filesystem change failed. When raised after
            backups were made, the target may be left incomplete and the
            message says what to do.
    """
    lib_dir = locate_target(npm_path, manifest, query, progress)
    source_dir = Path(source_dir)

    check_for_leftovers(lib_dir, manifest)
    check_preconditions(lib_dir, source_dir, manifest)
    back_up_originals(lib_dir, manifest, progress)

    try:
        copy_in(lib_dir, source_dir, manifest, progress)
    except OSError as e:
        logger.debug("Copy into %s failed", lib_dir, exc_info=True)
        emit(progress, f"Error while copying files: {e}")
        emit(progress, "Restoring backed-up original files...")
        try:
            restore_backups(lib_dir, manifest, progress)
        except FsActionError as restore_error:
            raise FsActionError(
                f"{e}; restoring backups also failed: {restore_error}. "
                "The installation of npm-two-stage is incomplete; "
                "run `npm2stage uninstall` to clean up."
            ) from e
        raise FsActionError(
            f"{e}. Files copied before the failure remain in {lib_dir}; "
            "run `npm2stage uninstall` to remove them."
        ) from e
