"""Public lookup API over the configuration registry."""

from __future__ import annotations

from functools import partial

from result import Err, Ok, Result

from yamlprops.common import JsonDict, create_logger
from yamlprops.document import ConfigError
from yamlprops.registry import Config, ConfigNotFoundError, ConfigRegistry, RegistryError
from yamlprops.scoped import ScopedProperties
from yamlprops.sources import SCMFetcher

logger = create_logger("api")

type PropertiesError = RegistryError | ConfigError

EMPTY_CONFIGURATION_WARNING = "Configuration is empty"
DEFAULT_CONFIGURATION_NOTICE = "Obtaining default configuration"


class YamlProperties:
    """Lookup operations used by running jobs.

    Hard failures come back as ``Err``. Soft conditions are only logged:
    an empty configuration, a default lookup, a missing local holder.
    """

    def __init__(self, registry: ConfigRegistry, fetcher: SCMFetcher | None = None) -> None:
        self._registry = registry
        self._fetcher = fetcher

    @property
    def registry(self) -> ConfigRegistry:
        return self._registry

    def lookup(self, name: str | None = None) -> Result[JsonDict, PropertiesError]:
        """Parsed configuration by name, or the default configuration when no name is given.

        A default lookup against an empty registry is ``Ok({})``; a named
        lookup that matches nothing is ``ConfigNotFoundError``.
        """
        match self._select(name):
            case Err(error):
                return Err(error)
            case Ok(None):
                return Ok({})
            case Ok(config):
                return config.get_config_map(self._fetcher).inspect(partial(_warn_if_empty, config.name))

    def lookup_text(self, name: str | None = None) -> Result[str, PropertiesError]:
        """Raw YAML text, selected with the same rules as ``lookup``."""
        match self._select(name):
            case Err(error):
                return Err(error)
            case Ok(None):
                return Ok("")
            case Ok(config):
                return config.get_yaml_config(self._fetcher)

    def list_categories(self) -> set[str]:
        return self._registry.get_categories()

    def list_names_in_category(self, category: str) -> list[str]:
        return [config.name for config in self._registry.get_configs_by_category(category)]

    def lookup_scoped(self, holder: ScopedProperties | None) -> Result[JsonDict, ConfigError]:
        if holder is None:
            logger.debug("No local configuration")
            return Ok({})

        return holder.get_config_map(self._fetcher).inspect(partial(_warn_if_empty, holder.document_name))

    def _select(self, name: str | None) -> Result[Config | None, RegistryError]:
        if name is not None:
            return self._registry.get_config_by_name(name).inspect_err(_log_lookup_error)

        logger.info(DEFAULT_CONFIGURATION_NOTICE)
        match self._registry.get_default_config():
            case Err(ConfigNotFoundError()):
                logger.debug("Registry is empty, default configuration is empty")
                return Ok(None)
            case Err(error):
                _log_lookup_error(error)
                return Err(error)
            case Ok(config):
                return Ok(config)


def _warn_if_empty(name: str, config_map: JsonDict) -> None:
    if not config_map:
        logger.warning(EMPTY_CONFIGURATION_WARNING, name=name)


def _log_lookup_error(error: RegistryError) -> None:
    logger.error("Configuration lookup failed", error=error.message)
