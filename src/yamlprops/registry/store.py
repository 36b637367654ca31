"""File-based registry persistence."""

from __future__ import annotations

from pathlib import Path

from result import Ok, Result

from yamlprops.common import create_logger
from yamlprops.storage import StoreError, load_model, save_model

from .models import Config, RegistryDocument
from .registry import ConfigRegistry

logger = create_logger("registry.store")


class FileRegistryStore:
    """Reads and writes the registry document as a YAML file.

    A missing file is an empty registry, not an error.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Result[RegistryDocument, StoreError]:
        if not self.path.is_file():
            logger.debug("Registry file not found, starting empty", path=str(self.path))
            return Ok(RegistryDocument())

        return load_model(self.path, RegistryDocument).inspect(
            lambda document: logger.debug("Registry loaded", path=str(self.path), count=len(document.configs))
        )

    def save(self, document: RegistryDocument) -> Result[None, StoreError]:
        logger.debug("Saving registry", path=str(self.path), count=len(document.configs))
        return save_model(self.path, document)

    def load_into(self, registry: ConfigRegistry) -> Result[RegistryDocument, StoreError]:
        """Load the file and replace the registry contents with it."""
        return self.load().inspect(lambda document: registry.set_configs(document.configs))

    def save_configs(self, configs: list[Config]) -> Result[None, StoreError]:
        """Replace the stored configs, keeping the rest of the document."""
        return self.load().and_then(
            lambda document: self.save(document.model_copy(update={"configs": list(configs)}))
        )
