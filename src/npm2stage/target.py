"""Checks on the npm installation that npm-two-stage goes into."""

import json
import logging
import os
import shutil
import subprocess
from pathlib import Path

from npm2stage.exceptions import BadInstallationError
from npm2stage.exceptions import NoTargetError
from npm2stage.exceptions import WrongVersionError
from npm2stage.models import DEFAULT_MANIFEST
from npm2stage.models import Manifest

logger = logging.getLogger(__name__)


class NpmQuery:
    """Asks the npm found on PATH about itself."""

    def __init__(self, command: str = "npm"):
        self.command = command

    def _run(self, *args: str) -> str:
        executable = shutil.which(self.command)
        if executable is None:
            raise NoTargetError(f"{self.command} not found on PATH")

        logger.debug("Running %s %s", executable, " ".join(args))
        try:
            completed = subprocess.run(
                [executable, *args], capture_output=True, text=True, check=True
            )
        except subprocess.CalledProcessError as e:
            raise NoTargetError(
                f"{self.command} {' '.join(args)} exited with status {e.returncode}"
            ) from e
        except OSError as e:
            raise NoTargetError(f"Unable to run {self.command}: {e}") from e

        return completed.stdout.strip()

    def version(self) -> str:
        """Get the version of the global npm."""
        return self._run("--version")

    def npm_dir(self) -> Path:
        """Get the installation directory of the global npm."""
        prefix = Path(self._run("prefix", "-g"))
        if os.name == "nt":
            return prefix / "node_modules" / "npm"
        return prefix / "lib" / "node_modules" / "npm"


def expect_correct_npm_version(
    npm_path: Path | None = None,
    manifest: Manifest = DEFAULT_MANIFEST,
    query: NpmQuery | None = None,
) -> None:
    """Check that the npm at npm_path is the version the manifest is for.

    Args:
        npm_path: npm installation directory. If None, the global npm is
            asked for its version.
        manifest: Names the package and version expected
        query: Used when npm_path is None. Defaults to NpmQuery().

    Raises:
        NoTargetError: If there is no npm at npm_path, or no global npm
        BadInstallationError: If npm_path has a package.json that cannot
            be parsed
        WrongVersionError: If the version found is not the expected one
    """
    if npm_path is None:
        if query is None:
            query = NpmQuery()
        found = query.version()
        if found != manifest.expected_version:
            raise WrongVersionError(manifest.expected_version, found)
        return

    package_json = Path(npm_path) / "package.json"
    try:
        data = json.loads(package_json.read_text(encoding="utf-8-sig"))
    except FileNotFoundError as e:
        raise NoTargetError(str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BadInstallationError(
            f"failed to parse package.json at {npm_path}"
        ) from e
    except OSError as e:
        raise BadInstallationError(
            f"Unable to read package.json at {npm_path}: {e}"
        ) from e

    if not isinstance(data, dict):
        raise BadInstallationError(f"failed to parse package.json at {npm_path}")
    if data.get("name") != manifest.package_name:
        raise NoTargetError(f"package at {npm_path} is not {manifest.package_name}")

    found = data.get("version")
    if found != manifest.expected_version:
        raise WrongVersionError(manifest.expected_version, str(found))


def get_lib_dir(npm_dir: Path) -> Path:
    """Get the lib directory of an npm installation.

    Raises:
        BadInstallationError: If lib is missing or cannot be entered and read
    """
    lib_dir = Path(npm_dir) / "lib"
    if not lib_dir.is_dir() or not os.access(lib_dir, os.R_OK | os.X_OK):
        raise BadInstallationError(
            "Unable to access lib directory at supposed npm path"
        )
    return lib_dir
