"""XDG-compliant path management for stowed.

XDG defaults:
- Config: ~/.config/stowed/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "stowed"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/stowed/ (or XDG_CONFIG_HOME/stowed/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/stowed/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/stowed/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_default_target_dir() -> Path:
    """Directory links are created in when nothing else is configured."""
    return Path.home()


def get_default_root_dir() -> Path:
    """Directory packages are looked up in when nothing else is configured."""
    return Path.cwd()
