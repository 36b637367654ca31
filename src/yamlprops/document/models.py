"""Error models for YAML document resolution and parsing."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from yamlprops.sources import FetchError


class ConfigYamlError(BaseModel):
    """YAML text could not be parsed."""

    model_config = ConfigDict(extra="forbid")

    name: str
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """YAML parsed, but its root is not a mapping."""

    model_config = ConfigDict(extra="forbid")

    name: str
    message: str


type ConfigError = FetchError | ConfigYamlError | ConfigValidationError


__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConfigYamlError",
]
