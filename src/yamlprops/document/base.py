"""Source-backed YAML document with compute-once text and mapping."""

from __future__ import annotations

import copy
import threading
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, PrivateAttr
from result import Result

from yamlprops.common import JsonDict, create_logger
from yamlprops.sources import ConfigSource, FetchError, SCMFetcher, resolve_text

from .models import ConfigError
from .parser import parse_yaml_mapping

logger = create_logger("document")


class YamlDocument(BaseModel):
    """A configuration source plus its lazily resolved and parsed YAML.

    The first call to ``get_yaml_config`` or ``get_config_map`` resolves the
    source; both outcomes are cached for the lifetime of the instance,
    including failures. A reload replaces the instance instead of clearing it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    if TYPE_CHECKING:
        # Declared by subclasses so it serializes after their identifying fields.
        source: ConfigSource

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)
    _yaml_text: Result[str, FetchError] | None = PrivateAttr(default=None)
    _config_map: Result[JsonDict, ConfigError] | None = PrivateAttr(default=None)

    @property
    def document_name(self) -> str:
        return self.source.describe()

    @property
    def is_resolved(self) -> bool:
        return self._yaml_text is not None

    def get_yaml_config(self, fetcher: SCMFetcher | None = None) -> Result[str, FetchError]:
        with self._lock:
            return self._resolve_text_locked(fetcher)

    def get_config_map(self, fetcher: SCMFetcher | None = None) -> Result[JsonDict, ConfigError]:
        """Parsed mapping, resolved once. Each call returns an independent copy."""
        with self._lock:
            if self._config_map is None:
                self._config_map = self._resolve_text_locked(fetcher).and_then(
                    lambda text: parse_yaml_mapping(text, name=self.document_name)
                )
                self._config_map.inspect_err(
                    lambda err: logger.error("Configuration unavailable", name=self.document_name, error=err.message)
                )
            return self._config_map.map(copy.deepcopy)

    def _resolve_text_locked(self, fetcher: SCMFetcher | None) -> Result[str, FetchError]:
        if self._yaml_text is None:
            logger.debug("Resolving configuration text", name=self.document_name, kind=self.source.kind)
            self._yaml_text = resolve_text(self.source, fetcher)
        return self._yaml_text
