"""Common models and helpers used across yamlprops modules."""

from .fields import JsonDict, NonEmptyString, RepoPath
from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppDirectories, AppInfo, AppPaths
from .paths import get_data_directory, get_global_config_root, get_project_root, resolve_working_directory

__all__ = [
    "AppDirectories",
    "AppInfo",
    "AppPaths",
    "JsonDict",
    "LoggingConfig",
    "NonEmptyString",
    "RepoPath",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "get_global_config_root",
    "get_project_root",
    "resolve_working_directory",
    "setup_cli_logging",
]
