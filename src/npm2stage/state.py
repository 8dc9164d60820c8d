"""Inspection of which npm-two-stage artifacts are present."""

from pathlib import Path

from npm2stage.models import Manifest
from npm2stage.models import PatchState


def probe(lib_dir: Path, manifest: Manifest) -> PatchState:
    """Find which backups, standard files and added entries exist.

    Args:
        lib_dir: npm lib directory
        manifest: Names the files to look for

    Returns:
        PatchState with one entry per manifest item
    """
    backups = {
        name: (lib_dir / manifest.backup_path(name)).exists()
        for name in manifest.changed_files
    }
    standard_files = {
        name: (lib_dir / manifest.file_path(name)).exists()
        for name in manifest.changed_files
    }

    added = {}
    for name in manifest.added_files:
        rel_path = manifest.file_path(name)
        added[rel_path.as_posix()] = (lib_dir / rel_path).exists()
    for name in manifest.added_dirs:
        added[name] = (lib_dir / name).exists()

    return PatchState(backups=backups, standard_files=standard_files, added=added)
