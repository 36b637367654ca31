"""Data and error models for configuration sources."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from yamlprops.common import NonEmptyString, RepoPath


class ConfigSourceKind(str, Enum):
    """Configuration source kinds."""

    MANUAL = "manual"
    SCM = "scm"


class ManualConfigSource(BaseModel):
    """YAML text entered directly by an administrator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["manual"] = "manual"
    text: str = ""

    def describe(self) -> str:
        return "manual"


class SCMConfigSource(BaseModel):
    """YAML file stored in a version-controlled repository."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["scm"] = "scm"
    repository: NonEmptyString
    owner: NonEmptyString
    branch: NonEmptyString
    credential_id: NonEmptyString
    path: RepoPath

    def describe(self) -> str:
        return f"{self.owner}/{self.repository}@{self.branch}:{self.path}"


ConfigSource = Annotated[ManualConfigSource | SCMConfigSource, Field(discriminator="kind")]


class FetchError(BaseModel):
    """Failed to obtain YAML text from a configuration source."""

    model_config = ConfigDict(extra="forbid")

    source: str
    message: str
    cause: str | None = None


__all__ = [
    "ConfigSource",
    "ConfigSourceKind",
    "FetchError",
    "ManualConfigSource",
    "SCMConfigSource",
]
