"""Discovery and loading of the project-local properties file."""

from __future__ import annotations

from pathlib import Path

from result import Ok, Result

from yamlprops.common import AppDirectories, create_logger, get_project_root
from yamlprops.storage import StoreError, load_model, save_model

from .models import ScopedProperties

logger = create_logger("scoped")


def find_scoped_properties_file(working_dir: Path | None, directories: AppDirectories, filename: str) -> Path | None:
    """Return the properties file of the enclosing project, if the project has one."""
    project_root = get_project_root(working_dir, directories)
    if project_root is None:
        return None

    candidate = project_root / directories.project_marker / filename
    return candidate if candidate.is_file() else None


def load_scoped_properties(
    working_dir: Path | None,
    directories: AppDirectories,
    filename: str,
) -> Result[ScopedProperties | None, StoreError]:
    """Load the project-local holder.

    Returns:
        Ok(ScopedProperties) when a properties file exists.
        Ok(None) when there is no local configuration.
        Err(StoreError) when the file exists but cannot be loaded.
    """
    path = find_scoped_properties_file(working_dir, directories, filename)
    if path is None:
        logger.debug("No scoped properties file", working_dir=str(working_dir) if working_dir else None)
        return Ok(None)

    return load_model(path, ScopedProperties)


def save_scoped_properties(
    project_root: Path,
    directories: AppDirectories,
    filename: str,
    holder: ScopedProperties,
) -> Result[Path, StoreError]:
    path = project_root / directories.project_marker / filename
    return save_model(path, holder).map(lambda _: path)
