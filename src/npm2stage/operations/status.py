"""Status operation."""

from pathlib import Path

from npm2stage.models import DEFAULT_MANIFEST
from npm2stage.models import InstallStatus
from npm2stage.models import Manifest
from npm2stage.models import PatchState
from npm2stage.models import StatusReport
from npm2stage.operations.shared import locate_target
from npm2stage.progress import ProgressCallback
from npm2stage.progress import emit
from npm2stage.state import probe
from npm2stage.target import NpmQuery

SUMMARIES = {
    InstallStatus.BAD: (
        "Files expected in an npm installation are missing; "
        "this npm installation is damaged."
    ),
    InstallStatus.NOT_INSTALLED: "npm-two-stage is not installed at this location.",
    InstallStatus.FULLY_INSTALLED: (
        "npm-two-stage is fully installed at this location."
    ),
    InstallStatus.INCOMPLETE: (
        "Incomplete installation of npm-two-stage at this location."
    ),
}


def classify(state: PatchState) -> InstallStatus:
    """Decide what a PatchState means.

    After installation the standard file names hold the replacement files,
    so a standard file is expected to be present in every healthy state.
    One that is missing along with its backup cannot be explained by an
    installation at all.
    """
    if any(not state.backups[name] for name in state.missing_standard_files):
        return InstallStatus.BAD
    if state.missing_standard_files:
        return InstallStatus.INCOMPLETE
    if not state.missing_backups and not state.missing_added:
        return InstallStatus.FULLY_INSTALLED
    if not state.present_backups and not state.present_added:
        return InstallStatus.NOT_INSTALLED
    return InstallStatus.INCOMPLETE


def _report_state(
    state: PatchState, manifest: Manifest, progress: ProgressCallback | None
) -> None:
    if not state.missing_backups:
        emit(progress, "All backups present.")
    elif not state.present_backups:
        emit(progress, "No backups present.")
    else:
        emit(progress, "Incomplete set of backups present.")
        missing = [manifest.backup_path(n).as_posix() for n in state.missing_backups]
        emit(progress, f"Missing: {', '.join(missing)}")

    if not state.missing_standard_files:
        emit(progress, "No standard files missing.")
    else:
        emit(progress, "Some standard files are missing.")
        missing = [
            manifest.file_path(n).as_posix() for n in state.missing_standard_files
        ]
        emit(progress, f"Missing: {', '.join(missing)}")

    if not state.missing_added:
        emit(progress, "All expected new files present.")
    elif not state.present_added:
        emit(progress, "No new files present.")
    else:
        emit(progress, "Some expected new files are missing.")
        emit(progress, f"Missing: {', '.join(state.missing_added)}")


def get_status(
    npm_path: Path | None = None,
    *,
    manifest: Manifest = DEFAULT_MANIFEST,
    query: NpmQuery | None = None,
    progress: ProgressCallback | None = None,
) -> StatusReport:
    """Report the condition of npm-two-stage artifacts in an npm installation.

    Nothing is changed.

    Raises:
        NoTargetError: If there is no npm at the target
        WrongVersionError: If the target npm is the wrong version
        BadInstallationError: If the target npm lib directory is inaccessible
    """
    lib_dir = locate_target(npm_path, manifest, query, progress)

    state = probe(lib_dir, manifest)
    _report_state(state, manifest, progress)

    status = classify(state)
    emit(progress, SUMMARIES[status])

    return StatusReport(lib_dir=lib_dir, state=state, status=status)
