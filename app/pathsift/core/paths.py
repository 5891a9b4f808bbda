"""XDG-compliant path management for pathsift.

XDG defaults:
- Config: ~/.config/pathsift/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "pathsift"


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
        Path to ~/.config/pathsift/ (or XDG_CONFIG_HOME/pathsift/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_job_file_path() -> Path:
    """Get the default walk job file path.

    Returns:
        Path to ~/.config/pathsift/jobs.toml.
    """
    return get_config_dir() / "jobs.toml"


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/pathsift/theme.toml.
    """
    return get_config_dir() / "theme.toml"
