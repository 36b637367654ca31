from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from yamlprops.common import AppDirectories, AppInfo, AppPaths, get_global_config_root


class SCMSettings(BaseModel):
    """Settings for the git-backed SCM fetcher."""

    host: str = "github.com"
    timeout: Annotated[float, Field(gt=0)] | None = 60.0
    credentials: dict[str, SecretStr] = Field(default_factory=dict)


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    scm: SCMSettings = SCMSettings()

    model_config = SettingsConfigDict(
        env_prefix="YAMLPROPS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_app_directories(self) -> AppDirectories:
        return AppDirectories(
            app_name=self.paths.config_dir_name,
            project_marker=self.paths.project_subdir_name,
        )

    def default_registry_path(self) -> Path:
        return get_global_config_root(self.to_app_directories()) / self.paths.registry_filename


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "SCMSettings",
    "Settings",
    "get_settings",
]
