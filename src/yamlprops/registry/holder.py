"""Process-wide registry holder with explicit init and teardown."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from yamlprops.common import create_logger

from .models import Config
from .registry import ConfigRegistry

logger = create_logger("registry.holder")

_lock = threading.RLock()
_registry: ConfigRegistry | None = None


def init_registry(configs: Iterable[Config] = ()) -> ConfigRegistry:
    """Install a fresh process-wide registry holding ``configs``."""
    global _registry
    with _lock:
        _registry = ConfigRegistry(configs)
        logger.debug("Process registry initialized", count=len(_registry))
        return _registry


def get_registry() -> ConfigRegistry:
    """Return the process-wide registry, creating an empty one on first use."""
    global _registry
    with _lock:
        if _registry is None:
            _registry = ConfigRegistry()
        return _registry


def teardown_registry() -> None:
    global _registry
    with _lock:
        _registry = None
