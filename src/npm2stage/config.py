"""User configuration for npm2stage."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from npm2stage.exceptions import ConfigValidationError
from npm2stage.exceptions import ConfigVersionError

CONFIG_VERSION = 1

# Where npm installs npm-two-stage as a dependency of the current project
DEFAULT_SOURCE_DIR = Path("node_modules") / "npm-two-stage" / "src"


@dataclass
class Settings:
    """Settings read from the user's config file."""

    version: int = CONFIG_VERSION
    source_dir: Path | None = None  # npm-two-stage files to install
    npm_command: str = "npm"  # Used when no npm path is given

    @classmethod
    def default_path(cls) -> Path:
        """Get default config location using platformdirs."""
        return user_config_path("npm2stage") / "config.json"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        data: dict = {"version": self.version, "npm_command": self.npm_command}
        if self.source_dir is not None:
            data["source_dir"] = str(self.source_dir)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Config must be a JSON object")
        if "version" not in data:
            raise ConfigValidationError("Config missing 'version' key")

        version = data["version"]
        if not isinstance(version, int):
            raise ConfigValidationError(f"Config version must be a number: {version!r}")
        if version > CONFIG_VERSION:
            raise ConfigVersionError(
                f"Config version {version} is newer than supported version {CONFIG_VERSION}"
            )

        source_dir = data.get("source_dir")
        return cls(
            version=version,
            source_dir=Path(source_dir).expanduser() if source_dir else None,
            npm_command=data.get("npm_command", "npm"),
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load settings from JSON file. Uses defaults if it doesn't exist.

        Args:
            path: Path to config file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in config {path}: {e}")
        return cls.from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """Save settings to JSON file atomically.

        Args:
            path: Path to save config. If None, uses default location.
        """
        if path is None:
            path = self.default_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file, then rename
        temp_path = path.with_suffix(".tmp")
        temp_path.write_text(json.dumps(self.to_dict(), indent=2))
        temp_path.replace(path)

    def resolve_source_dir(self, override: Path | None = None) -> Path:
        """Pick the npm-two-stage source directory.

        An explicit override wins, then the configured directory, then
        node_modules/npm-two-stage/src under the current directory.
        """
        if override is not None:
            return override.resolve()
        if self.source_dir is not None:
            return self.source_dir.resolve()
        return (Path.cwd() / DEFAULT_SOURCE_DIR).resolve()
