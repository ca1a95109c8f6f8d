"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from stowed.core.paths import (
    APP_NAME,
    get_config_dir,
    get_config_path,
    get_default_root_dir,
    get_default_target_dir,
    get_user_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self, tmp_path: Path) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {"HOME": str(tmp_path)}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == tmp_path / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME


class TestFilePaths:
    """Tests for file path helpers."""

    def test_config_and_theme_live_in_config_dir(self) -> None:
        """config.toml and theme.toml sit in the config directory."""
        assert get_config_path() == get_config_dir() / "config.toml"
        assert get_user_theme_path() == get_config_dir() / "theme.toml"


class TestDefaults:
    """Tests for default directories."""

    def test_default_target_is_home(self) -> None:
        """Links go to the home directory by default."""
        assert get_default_target_dir() == Path.home()

    def test_default_root_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Packages are looked up in the working directory by default."""
        monkeypatch.chdir(tmp_path)
        assert get_default_root_dir() == tmp_path
