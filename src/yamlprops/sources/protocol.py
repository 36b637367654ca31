"""Fetch capability protocol for SCM-backed sources."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import FetchError, SCMConfigSource


class SCMFetcher(Protocol):
    """Protocol for retrieving YAML text from a repository."""

    def fetch(self, source: SCMConfigSource) -> Result[str, FetchError]:
        """Fetch the file at ``source.path`` from ``source.owner/source.repository`` at ``source.branch``.

        Implementations make at most one logical attempt per call. Retry and
        caching policy, if any, belong to the implementation.
        """
        ...
