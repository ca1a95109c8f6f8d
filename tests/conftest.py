"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Directory holding test packages."""
    path = tmp_path / "root"
    path.mkdir()
    return path


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Directory links are deployed into."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def make_package(root_dir: Path) -> Callable[..., Path]:
    """Create a package under root_dir from relative entries.

    Entries ending with ``/`` are created as directories, everything
    else as files (parent directories are created as needed).
    """

    def _make(name: str, *entries: str) -> Path:
        package_dir = root_dir / name
        package_dir.mkdir(exist_ok=True)
        for entry in entries:
            path = package_dir / entry
            if entry.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(f"# {entry}\n")
        return package_dir

    return _make
