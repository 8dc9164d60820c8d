"""Primitive filesystem changes: removing files, pruning and grafting trees."""

import errno
import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from npm2stage.files.discover import discover_tree
from npm2stage.progress import ProgressCallback
from npm2stage.progress import emit

logger = logging.getLogger(__name__)


def _as_path(value: object, name: str) -> Path:
    """Validate a path argument.

    Raises:
        ValueError: If value is None or empty
        TypeError: If value is not a str or path-like object
    """
    if value is None or value == "":
        raise ValueError(f"{name} is required")
    if not isinstance(value, (str, os.PathLike)):
        raise TypeError(f"{name} must be a path, not {type(value).__name__}")
    return Path(value)


def _expect_directory(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
    if not path.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))


def remove_files(
    paths: Sequence[str | os.PathLike], progress: ProgressCallback | None = None
) -> None:
    """Remove files, in the order given.

    A file that does not exist is reported and skipped.

    Args:
        paths: Files to remove
        progress: Receives a message for each file that could not be found

    Raises:
        ValueError: If paths is None or empty, or contains an empty path
        TypeError: If paths is not a sequence of paths
        OSError: On the first failure other than a missing file. Files
            removed before the failure stay removed.
    """
    if paths is None:
        raise ValueError("paths is required")
    if isinstance(paths, (str, bytes)) or not isinstance(paths, Sequence):
        raise TypeError(f"paths must be a sequence, not {type(paths).__name__}")
    if not paths:
        raise ValueError("paths must not be empty")
    checked = [_as_path(item, "path") for item in paths]

    for path in checked:
        try:
            path.unlink()
        except FileNotFoundError:
            emit(progress, f"Could not find file {path} for removal")


def prune(path: str | os.PathLike) -> None:
    """Remove a directory and everything under it.

    Raises:
        ValueError: If path is None or empty
        TypeError: If path is not a path
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If path is not a directory
        OSError: If anything in the tree cannot be removed
    """
    path = _as_path(path, "path")
    _expect_directory(path)
    shutil.rmtree(path)


def _discard_partial(path: Path, progress: ProgressCallback | None) -> None:
    """Remove a partial copy, reporting but not raising on failure."""
    try:
        prune(path)
    except OSError as e:
        logger.warning("Could not remove partial copy %s: %s", path, e)
        emit(progress, f"Unable to remove partial copy {path}: {e}")


def graft(
    source_dir: str | os.PathLike,
    dest_parent: str | os.PathLike,
    progress: ProgressCallback | None = None,
) -> None:
    """Copy a directory tree into another directory.

    The copy keeps the source's name: the result is
    dest_parent / source_dir.name. If copying fails partway, the partial
    copy is removed before the error propagates.

    Args:
        source_dir: Directory to copy
        dest_parent: Existing directory to copy into
        progress: Receives a message if a partial copy cannot be removed

    Raises:
        ValueError: If either argument is None or empty
        TypeError: If either argument is not a path
        FileNotFoundError: If either directory does not exist
        NotADirectoryError: If either argument is not a directory
        FileExistsError: If dest_parent already has an entry with the
            source's name
        OSError: If the source cannot be read or the copy cannot be written
    """
    source_dir = _as_path(source_dir, "source_dir")
    dest_parent = _as_path(dest_parent, "dest_parent")
    _expect_directory(source_dir)
    _expect_directory(dest_parent)

    # Read the whole tree first; an unreadable source fails before any writes
    dirs, files = discover_tree(source_dir)

    dest = dest_parent / source_dir.resolve().name
    if dest.exists(follow_symlinks=False):
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(dest))
    dest.mkdir()

    try:
        for rel_dir in dirs:
            (dest / rel_dir).mkdir(parents=True, exist_ok=True)
        for rel_file in files:
            shutil.copyfile(source_dir / rel_file, dest / rel_file)
    except OSError:
        _discard_partial(dest, progress)
        raise
