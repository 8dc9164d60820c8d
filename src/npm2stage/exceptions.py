"""Custom exceptions for npm2stage."""

from collections.abc import Sequence

from npm2stage.models import ErrorCode


class Npm2StageError(Exception):
    """Base exception for npm2stage."""

    exit_code: int = 1


class NoTargetError(Npm2StageError):
    """No npm found where one was expected."""

    exit_code = ErrorCode.NO_NPM


class WrongVersionError(Npm2StageError):
    """The target npm is not the version npm-two-stage was made for."""

    exit_code = ErrorCode.WRONG_NPM_VER

    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"wrong version of npm: found {found} (expected {expected})")


class BadInstallationError(Npm2StageError):
    """The target npm installation is damaged or inaccessible."""

    exit_code = ErrorCode.BAD_NPM_INST


class BadProjectError(BadInstallationError):
    """The npm-two-stage source to install from is incomplete."""

    exit_code = ErrorCode.BAD_PROJECT


class LeftoversError(Npm2StageError):
    """Remains of a previous installation exist in the target."""

    exit_code = ErrorCode.LEFTOVERS

    def __init__(self, items: Sequence[str]):
        self.items = items
        listed = ", ".join(items[:3])
        if len(items) > 3:
            listed += f", ... ({len(items)} total)"
        super().__init__(
            f"evidence of previous npm-two-stage installation ({listed}) "
            "in target location"
        )


class FsActionError(Npm2StageError):
    """A filesystem change failed."""

    exit_code = ErrorCode.FS_ACTION_FAIL


class ConfigValidationError(Npm2StageError):
    """Config file is invalid or malformed."""


class ConfigVersionError(Npm2StageError):
    """Config file version is unsupported."""
