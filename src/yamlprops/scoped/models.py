"""Models for job- and branch-scoped properties."""

from __future__ import annotations

from enum import Enum

from yamlprops.document import YamlDocument
from yamlprops.sources import ConfigSource


class PropertyScope(str, Enum):
    """What a scoped property holder is attached to."""

    JOB = "job"
    BRANCH = "branch"


class ScopedProperties(YamlDocument):
    """A single configuration attached to one job or branch (.yamlprops/properties.yaml)."""

    scope: PropertyScope = PropertyScope.JOB
    owner: str = ""
    source: ConfigSource

    @property
    def document_name(self) -> str:
        return f"{self.scope.value}:{self.owner}" if self.owner else self.scope.value
