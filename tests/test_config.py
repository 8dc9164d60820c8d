"""Tests for user configuration."""

import json
from pathlib import Path

import pytest

from npm2stage.config import CONFIG_VERSION
from npm2stage.config import DEFAULT_SOURCE_DIR
from npm2stage.config import Settings
from npm2stage.exceptions import ConfigValidationError
from npm2stage.exceptions import ConfigVersionError


class TestSettings:
    """Tests for Settings."""

    def test_load_missing_file_gives_defaults(self, tmp_path):
        """Test that no config file means default settings."""
        settings = Settings.load(tmp_path / "config.json")

        assert settings == Settings()
        assert settings.source_dir is None
        assert settings.npm_command == "npm"

    def test_save_and_load(self, tmp_path):
        """Test that saved settings load back the same."""
        path = tmp_path / "nested" / "config.json"
        settings = Settings(source_dir=tmp_path / "src", npm_command="npm6")

        settings.save(path)

        assert Settings.load(path) == settings
        assert not path.with_suffix(".tmp").exists()

    def test_save_omits_unset_source_dir(self, tmp_path):
        """Test that an unset source directory is not written."""
        path = tmp_path / "config.json"

        Settings().save(path)

        assert json.loads(path.read_text()) == {
            "version": CONFIG_VERSION,
            "npm_command": "npm",
        }

    def test_load_invalid_json(self, tmp_path):
        """Test that a corrupt config file is reported."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigValidationError, match="Invalid JSON"):
            Settings.load(path)

    def test_default_path_is_per_user(self):
        """Test that the default location is named for the tool."""
        path = Settings.default_path()

        assert path.name == "config.json"
        assert "npm2stage" in path.parts

    @pytest.mark.parametrize(
        "data",
        [
            [1, 2, 3],
            {"npm_command": "npm"},
            {"version": "1"},
        ],
    )
    def test_from_dict_rejects_malformed(self, data):
        """Test that malformed config data is rejected."""
        with pytest.raises(ConfigValidationError):
            Settings.from_dict(data)

    def test_from_dict_rejects_newer_version(self):
        """Test that a config from a newer release is refused."""
        with pytest.raises(ConfigVersionError):
            Settings.from_dict({"version": CONFIG_VERSION + 1})

    def test_from_dict_expands_user(self):
        """Test that ~ in the source directory is expanded."""
        settings = Settings.from_dict({"version": 1, "source_dir": "~/n2s"})

        assert settings.source_dir == Path("~/n2s").expanduser()


class TestResolveSourceDir:
    """Tests for Settings.resolve_source_dir()."""

    def test_override_wins(self, tmp_path):
        """Test that an explicit directory beats the configured one."""
        settings = Settings(source_dir=tmp_path / "configured")

        assert settings.resolve_source_dir(tmp_path / "given") == (
            tmp_path / "given"
        ).resolve()

    def test_configured_directory(self, tmp_path):
        """Test that the configured directory is used without an override."""
        settings = Settings(source_dir=tmp_path / "configured")

        assert settings.resolve_source_dir() == (tmp_path / "configured").resolve()

    def test_defaults_to_node_modules(self, tmp_path, monkeypatch):
        """Test the fallback under the current directory."""
        monkeypatch.chdir(tmp_path)

        assert Settings().resolve_source_dir() == (
            tmp_path / DEFAULT_SOURCE_DIR
        ).resolve()
