"""Common models used across yamlprops."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from yamlprops.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    project_subdir_name: str = f".{APP_NAME}"
    registry_filename: str = "registry.yaml"
    scoped_filename: str = "properties.yaml"


@dataclass(frozen=True)
class AppDirectories:
    """Application directory structure settings.

    Defines where yamlprops stores files relative to standard locations:
    - ~/.config/{app_name}/
    - ~/.local/share/{app_name}/
    - ./{project_marker}/

    Attributes:
        app_name: Name used in XDG directories (config and data)
        project_marker: Directory name that marks a project root
    """

    app_name: str = APP_NAME
    project_marker: str = f".{APP_NAME}"
