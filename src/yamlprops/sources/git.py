"""Git-backed SCM fetcher."""

from __future__ import annotations

import tempfile
from collections.abc import Mapping
from pathlib import Path

from pydantic import SecretStr
from result import Err, Ok, Result

from yamlprops.common import create_logger
from yamlprops.utils.git import clone_repository

from .models import FetchError, SCMConfigSource

logger = create_logger("sources.git")


class GitSCMFetcher:
    """Fetch configuration files by shallow-cloning the repository branch.

    Each call clones into a fresh temporary directory that is removed before
    returning, so no state is kept between calls.
    """

    def __init__(
        self,
        *,
        host: str = "github.com",
        credentials: Mapping[str, SecretStr] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._host = host
        self._credentials = dict(credentials or {})
        self._timeout = timeout

    def fetch(self, source: SCMConfigSource) -> Result[str, FetchError]:
        token = self._token_for(source.credential_id)
        url = self._clone_url(source, token)
        logger.debug("Cloning repository", source=source.describe(), host=self._host, authenticated=bool(token))

        with tempfile.TemporaryDirectory(prefix="yamlprops-scm-") as temp_dir:
            checkout = Path(temp_dir) / "checkout"
            clone_result = clone_repository(
                url,
                checkout,
                branch=source.branch,
                timeout=self._timeout,
                redact=token,
            )
            match clone_result:
                case Ok(path):
                    return _read_repository_file(path, source)
                case Err(err):
                    return Err(
                        FetchError(
                            source=source.describe(),
                            message=f"Could not fetch '{source.path}' from {source.owner}/{source.repository}",
                            cause=err.message,
                        )
                    )

    def _token_for(self, credential_id: str) -> str | None:
        secret = self._credentials.get(credential_id)
        if secret is None:
            logger.debug("No credential registered, cloning anonymously", credential_id=credential_id)
            return None
        return secret.get_secret_value()

    def _clone_url(self, source: SCMConfigSource, token: str | None) -> str:
        auth = f"x-access-token:{token}@" if token else ""
        return f"https://{auth}{self._host}/{source.owner}/{source.repository}.git"


def _read_repository_file(checkout: Path, source: SCMConfigSource) -> Result[str, FetchError]:
    root = checkout.resolve()
    target = (root / source.path).resolve()

    if not target.is_relative_to(root):
        return Err(FetchError(source=source.describe(), message=f"Path '{source.path}' escapes the repository"))

    if not target.is_file():
        return Err(
            FetchError(
                source=source.describe(),
                message=f"Path '{source.path}' not found on branch '{source.branch}'",
            )
        )

    try:
        return Ok(target.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        return Err(
            FetchError(
                source=source.describe(),
                message=f"Could not read '{source.path}'",
                cause=str(exc),
            )
        )
