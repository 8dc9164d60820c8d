"""Shared fixtures for npm2stage tests."""

import json
from pathlib import Path

import pytest

from npm2stage.models import DEFAULT_MANIFEST


class FakeNpmQuery:
    """Stands in for the global npm."""

    def __init__(self, version: str, npm_dir: Path):
        self.found_version = version
        self.found_npm_dir = npm_dir

    def version(self) -> str:
        return self.found_version

    def npm_dir(self) -> Path:
        return self.found_npm_dir


@pytest.fixture
def manifest():
    return DEFAULT_MANIFEST


@pytest.fixture
def npm_dir(tmp_path, manifest):
    """An untouched npm installation of the expected version."""
    npm_dir = tmp_path / "npm"
    lib_dir = npm_dir / "lib"
    lib_dir.mkdir(parents=True)
    (npm_dir / "package.json").write_text(
        json.dumps({"name": "npm", "version": manifest.expected_version})
    )
    (lib_dir / "npm.js").write_text("npm itself")
    for name in manifest.changed_files:
        path = lib_dir / manifest.file_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"original {name}")
    return npm_dir


@pytest.fixture
def lib_dir(npm_dir):
    return npm_dir / "lib"


@pytest.fixture
def source_dir(tmp_path, manifest):
    """A complete npm-two-stage source directory."""
    source_dir = tmp_path / "npm-two-stage" / "src"
    source_dir.mkdir(parents=True)
    for name in manifest.changed_files + manifest.added_files:
        path = source_dir / manifest.file_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"npm-two-stage {name}")
    for name in manifest.added_dirs:
        added = source_dir / name
        (added / "sub").mkdir(parents=True)
        (added / "index.js").write_text(f"index of {name}")
        (added / "sub" / "helper.js").write_text(f"helper in {name}")
    return source_dir


@pytest.fixture
def fake_query(npm_dir, manifest):
    return FakeNpmQuery(manifest.expected_version, npm_dir)


@pytest.fixture
def messages():
    """Collects progress messages."""
    return []


def _snapshot(root: Path) -> dict[str, str | None]:
    return {
        p.relative_to(root).as_posix(): None if p.is_dir() else p.read_text()
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot():
    """Maps every entry under a directory to its content (None for directories)."""
    return _snapshot
