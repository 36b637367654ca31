"""YAML-file persistence helpers."""

from .models import (
    BaseStoreError,
    StoreError,
    StoreReadError,
    StoreValidationError,
    StoreWriteError,
    StoreYamlError,
)
from .yaml_file import describe_validation_error, load_model, save_model

__all__ = [
    "BaseStoreError",
    "StoreError",
    "StoreReadError",
    "StoreValidationError",
    "StoreWriteError",
    "StoreYamlError",
    "describe_validation_error",
    "load_model",
    "save_model",
]
