"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, StrictStr

type JsonDict = dict[str, Any]

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

# Path inside a repository, relative to its root (e.g., "configs/app.yaml")
RepoPath = Annotated[
    StrictStr,
    Field(
        min_length=1,
        pattern=r"^[^/]",
        frozen=True,
        description="Repository-relative file path",
    ),
]

__all__ = [
    "JsonDict",
    "NonEmptyString",
    "RepoPath",
]
