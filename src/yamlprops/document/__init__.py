"""Lazily resolved YAML documents shared by registry entries and scoped holders."""

from .base import YamlDocument
from .models import ConfigError, ConfigValidationError, ConfigYamlError
from .parser import parse_yaml_mapping

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConfigYamlError",
    "YamlDocument",
    "parse_yaml_mapping",
]
