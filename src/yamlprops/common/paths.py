"""Locations of the registry file, the log directory and project roots."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppDirectories


def resolve_working_directory(working_dir: Path | None) -> Path:
    base = working_dir or Path.cwd()
    if base.is_file():
        base = base.parent
    try:
        return base.resolve(strict=False)
    except OSError:
        return base


def get_global_config_root(directories: AppDirectories) -> Path:
    """``$XDG_CONFIG_HOME/<app>``, falling back to ``~/.config/<app>``."""
    return _xdg_base("XDG_CONFIG_HOME", ".config") / directories.app_name


def get_data_directory(directories: AppDirectories) -> Path:
    """``$XDG_DATA_HOME/<app>``, falling back to ``~/.local/share/<app>``."""
    return _xdg_base("XDG_DATA_HOME", ".local/share") / directories.app_name


def get_project_root(start_dir: Path | None, directories: AppDirectories) -> Path | None:
    """Nearest directory at or above ``start_dir`` holding the project marker directory."""
    start = resolve_working_directory(start_dir)
    return next(
        (path for path in (start, *start.parents) if (path / directories.project_marker).is_dir()),
        None,
    )


def _xdg_base(env_var: str, home_relative: str) -> Path:
    configured = os.getenv(env_var)
    return Path(configured).expanduser() if configured else Path.home() / home_relative
