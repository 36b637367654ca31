"""In-memory registry of configuration entries."""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Iterable

from result import Err, Ok, Result

from yamlprops.common import create_logger

from .models import AmbiguousDefaultError, Config, ConfigNotFoundError

logger = create_logger("registry")


class ConfigRegistry:
    """Ordered collection of configs with name, category and default lookups.

    The collection is held as an immutable tuple and swapped wholesale by
    ``set_configs``; readers always see either the old or the new tuple.
    Insertion order is the tie-break for duplicate names: the first wins.
    """

    def __init__(self, configs: Iterable[Config] = ()) -> None:
        self._lock = threading.Lock()
        self._configs: tuple[Config, ...] = tuple(configs)

    def __len__(self) -> int:
        return len(self._snapshot())

    def set_configs(self, configs: Iterable[Config]) -> None:
        snapshot = tuple(configs)

        duplicates = sorted(name for name, count in Counter(c.name for c in snapshot).items() if count > 1)
        if duplicates:
            logger.warning("Duplicate config names; lookups use the first entry", names=duplicates)

        with self._lock:
            self._configs = snapshot

        logger.debug("Registry replaced", count=len(snapshot))

    def get_configs(self) -> tuple[Config, ...]:
        return self._snapshot()

    def get_names(self) -> list[str]:
        return [config.name for config in self._snapshot()]

    def get_config_by_name(self, name: str) -> Result[Config, ConfigNotFoundError]:
        match = next((config for config in self._snapshot() if config.name == name), None)
        if match is None:
            return Err(ConfigNotFoundError(name=name, message=f"No configuration named '{name}'"))
        return Ok(match)

    def get_configs_by_category(self, category: str) -> list[Config]:
        return [config for config in self._snapshot() if config.category == category]

    def get_categories(self) -> set[str]:
        return {config.category for config in self._snapshot()}

    def get_default_config(self) -> Result[Config, ConfigNotFoundError | AmbiguousDefaultError]:
        """Return the only config in the registry.

        Never picks one of several entries: more than one is an ambiguity the
        caller must resolve by naming the config.
        """
        configs = self._snapshot()

        match len(configs):
            case 0:
                return Err(ConfigNotFoundError(message="No configurations are defined"))
            case 1:
                return Ok(configs[0])
            case count:
                names = [config.name for config in configs]
                return Err(
                    AmbiguousDefaultError(
                        count=count,
                        names=names,
                        message=f"{count} configurations are defined; specify one of: {', '.join(names)}",
                    )
                )

    def _snapshot(self) -> tuple[Config, ...]:
        with self._lock:
            return self._configs
