"""Error models for YAML-file backed stores."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class BaseStoreError(BaseModel):
    """Base store error model."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class StoreReadError(BaseStoreError):
    """File could not be read."""


class StoreYamlError(BaseStoreError):
    """File content is not valid YAML."""

    line: int | None = None
    column: int | None = None


class StoreValidationError(BaseStoreError):
    """File content does not match the expected schema."""

    field: str | None = None


class StoreWriteError(BaseStoreError):
    """File could not be written."""


type StoreError = StoreReadError | StoreYamlError | StoreValidationError | StoreWriteError


__all__ = [
    "BaseStoreError",
    "StoreError",
    "StoreReadError",
    "StoreValidationError",
    "StoreWriteError",
    "StoreYamlError",
]
