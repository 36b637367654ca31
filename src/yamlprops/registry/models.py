"""Data and error models for the configuration registry."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from yamlprops.common import LoggingConfig, NonEmptyString
from yamlprops.document import YamlDocument
from yamlprops.sources import ConfigSource


class Config(YamlDocument):
    """One named, categorized configuration entry.

    Names are meant to be unique within a registry, but nothing here or in
    the registry enforces it.
    """

    name: NonEmptyString
    category: str = ""
    source: ConfigSource

    @property
    def document_name(self) -> str:
        return self.name


class RegistryDocument(BaseModel):
    """Persisted form of the registry (registry.yaml)."""

    model_config = ConfigDict(extra="forbid")

    configs: list[Config] = []
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class BaseRegistryError(BaseModel):
    """Base registry error model."""

    model_config = ConfigDict(extra="forbid")

    message: str


class ConfigNotFoundError(BaseRegistryError):
    """No configuration matched the lookup."""

    name: str | None = None


class AmbiguousDefaultError(BaseRegistryError):
    """Default lookup found more than one configuration."""

    count: int
    names: list[str]


type RegistryError = ConfigNotFoundError | AmbiguousDefaultError


__all__ = [
    "AmbiguousDefaultError",
    "BaseRegistryError",
    "Config",
    "ConfigNotFoundError",
    "RegistryDocument",
    "RegistryError",
]
