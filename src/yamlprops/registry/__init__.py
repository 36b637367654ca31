"""Named, categorized registry of YAML configurations."""

from .holder import get_registry, init_registry, teardown_registry
from .models import (
    AmbiguousDefaultError,
    BaseRegistryError,
    Config,
    ConfigNotFoundError,
    RegistryDocument,
    RegistryError,
)
from .registry import ConfigRegistry
from .store import FileRegistryStore

__all__ = [
    "AmbiguousDefaultError",
    "BaseRegistryError",
    "Config",
    "ConfigNotFoundError",
    "ConfigRegistry",
    "FileRegistryStore",
    "RegistryDocument",
    "RegistryError",
    "get_registry",
    "init_registry",
    "teardown_registry",
]
