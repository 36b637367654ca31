"""Configuration sources: where an entry's YAML text comes from."""

from .git import GitSCMFetcher
from .models import ConfigSource, ConfigSourceKind, FetchError, ManualConfigSource, SCMConfigSource
from .protocol import SCMFetcher
from .resolver import resolve_text

__all__ = [
    "ConfigSource",
    "ConfigSourceKind",
    "FetchError",
    "GitSCMFetcher",
    "ManualConfigSource",
    "SCMConfigSource",
    "SCMFetcher",
    "resolve_text",
]
