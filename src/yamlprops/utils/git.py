"""Git utility functions."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from pydantic import BaseModel
from result import Err, Ok, Result


class GitError(BaseModel):
    """Base error for git operations."""

    message: str


class GitNotInstalledError(GitError):
    """Git command not found."""

    pass


class GitCloneError(GitError):
    """Failed to clone repository."""

    url: str


def clone_repository(
    url: str,
    destination: Path,
    *,
    branch: str | None = None,
    depth: int = 1,
    timeout: float | None = None,
    redact: str | None = None,
) -> Result[Path, GitError]:
    """Shallow-clone ``url`` into ``destination``.

    ``redact`` is a secret embedded in ``url`` that must not leak into error messages.
    """
    safe_url = _redact(url, redact)
    if destination.exists():
        return Err(GitCloneError(url=safe_url, message=f"Destination already exists: {destination}"))

    command = ["git", "clone", "--depth", str(depth)]
    if branch:
        command += ["--branch", branch, "--single-branch"]
    command += [url, str(destination)]

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)

        subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
            env=_non_interactive_env(),
        )

        return Ok(destination)

    except FileNotFoundError:
        return Err(GitNotInstalledError(message="git command not found. Please install git."))
    except subprocess.TimeoutExpired:
        return Err(GitCloneError(url=safe_url, message=f"Timed out after {timeout}s cloning repository"))
    except subprocess.CalledProcessError as e:
        stderr = _redact(e.stderr.strip(), redact) if e.stderr else "Unknown error"
        return Err(GitCloneError(url=safe_url, message=f"Failed to clone repository: {stderr}"))
    except OSError as e:
        return Err(GitCloneError(url=safe_url, message=f"Unexpected error cloning repository: {e}"))


def _non_interactive_env() -> dict[str, str]:
    return os.environ | {"GIT_TERMINAL_PROMPT": "0"}


def _redact(text: str, secret: str | None) -> str:
    if not secret:
        return text
    return text.replace(secret, "***")
