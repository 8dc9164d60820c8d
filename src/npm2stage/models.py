"""Data models for npm2stage."""

from dataclasses import dataclass
from enum import Enum
from enum import IntEnum
from enum import auto
from pathlib import Path


class ErrorCode(IntEnum):
    """Exit status attached to each kind of failure."""

    NO_NPM = 11
    WRONG_NPM_VER = 12
    BAD_NPM_INST = 13
    LEFTOVERS = 14
    FS_ACTION_FAIL = 15
    BAD_PROJECT = 19


@dataclass(frozen=True)
class Manifest:
    """The files npm-two-stage touches in one specific version of npm.

    All names are relative to npm's lib directory, use posix separators,
    and leave off the extension.
    """

    expected_version: str
    changed_files: tuple[str, ...]  # Replaced; originals get backed up
    added_files: tuple[str, ...]  # New, no original
    added_dirs: tuple[str, ...]  # New directories, copied wholesale
    backup_suffix: str = "_ORIG"
    extension: str = ".js"
    package_name: str = "npm"

    def file_path(self, name: str) -> Path:
        """Get the relative path of a managed file."""
        return Path(f"{name}{self.extension}")

    def backup_path(self, name: str) -> Path:
        """Get the relative path a changed file is backed up to."""
        return Path(f"{name}{self.backup_suffix}{self.extension}")


# WARNING: these names are specific to this version of npm
DEFAULT_MANIFEST = Manifest(
    expected_version="6.13.4",
    changed_files=(
        "fetch-package-metadata",
        "install",
        "config/cmd-list",
        "install/action/refresh-package-json",
    ),
    added_files=("download", "git-offline", "offliner", "prepare-raw-module"),
    added_dirs=("download",),
)


@dataclass
class PatchState:
    """What was found in an npm lib directory.

    Keys of backups and standard_files are changed-file names; keys of
    added are relative paths of added files (with extension) and added
    directories.
    """

    backups: dict[str, bool]
    standard_files: dict[str, bool]
    added: dict[str, bool]

    @property
    def present_backups(self) -> list[str]:
        return [name for name, found in self.backups.items() if found]

    @property
    def missing_backups(self) -> list[str]:
        return [name for name, found in self.backups.items() if not found]

    @property
    def missing_standard_files(self) -> list[str]:
        return [name for name, found in self.standard_files.items() if not found]

    @property
    def present_added(self) -> list[str]:
        return [entry for entry, found in self.added.items() if found]

    @property
    def missing_added(self) -> list[str]:
        return [entry for entry, found in self.added.items() if not found]

    @property
    def leftovers(self) -> list[str]:
        """Backups and added entries that are present."""
        return self.present_backups + self.present_added


class InstallStatus(Enum):
    """Classification of an npm installation."""

    NOT_INSTALLED = auto()
    FULLY_INSTALLED = auto()
    INCOMPLETE = auto()
    BAD = auto()


@dataclass
class StatusReport:
    """Result of a status query."""

    lib_dir: Path
    state: PatchState
    status: InstallStatus
