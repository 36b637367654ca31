"""Resolve configuration sources to raw YAML text."""

from __future__ import annotations

from result import Err, Ok, Result

from yamlprops.common import create_logger

from .models import ConfigSource, FetchError, ManualConfigSource, SCMConfigSource
from .protocol import SCMFetcher

logger = create_logger("sources")

type ResolveResult = Result[str, FetchError]


def resolve_text(source: ConfigSource, fetcher: SCMFetcher | None = None) -> ResolveResult:
    match source:
        case ManualConfigSource():
            return Ok(source.text)
        case SCMConfigSource():
            logger.debug("Resolving SCM source", source=source.describe())
            return _resolve_scm(source, fetcher)


def _resolve_scm(source: SCMConfigSource, fetcher: SCMFetcher | None) -> ResolveResult:
    if fetcher is None:
        logger.error("No SCM fetcher configured", source=source.describe())
        return Err(
            FetchError(
                source=source.describe(),
                message="No SCM fetcher configured; cannot resolve repository-backed configuration.",
            )
        )

    def log_success(text: str) -> None:
        logger.debug("SCM source fetched", source=source.describe(), size=len(text))

    def log_error(err: FetchError) -> None:
        logger.error("Failed to fetch SCM source", source=source.describe(), error=err.message)

    return fetcher.fetch(source).inspect(log_success).inspect_err(log_error)
