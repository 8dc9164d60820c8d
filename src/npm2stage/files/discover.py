"""Directory tree discovery."""

from pathlib import Path


def _raise(error: OSError) -> None:
    raise error


def discover_tree(root: Path) -> tuple[list[Path], list[Path]]:
    """Discover all directories and files under root.

    Args:
        root: Directory to scan

    Returns:
        Tuple of (directories, files), each a sorted list of paths relative
        to root. Sorted so that parents come before their children and
        copies happen in a deterministic order.

    Raises:
        OSError: If any directory in the tree cannot be read
    """
    dirs = []
    files = []
    for dirpath, dirnames, filenames in root.walk(on_error=_raise):
        for dirname in dirnames:
            dirs.append((dirpath / dirname).relative_to(root))
        for filename in filenames:
            files.append((dirpath / filename).relative_to(root))

    return sorted(dirs), sorted(files)
