"""yamlprops - a registry of named, categorized YAML configuration blocks.

By default, yamlprops' internal logging is disabled when used as a library.
Library users can enable logging by calling yamlprops.enable_logging().
"""

from yamlprops.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
