"""YAML text to mapping conversion."""

from __future__ import annotations

from typing import Any

import yaml
from result import Err, Ok, Result

from yamlprops.common import JsonDict

from .models import ConfigValidationError, ConfigYamlError


def parse_yaml_mapping(text: str, *, name: str) -> Result[JsonDict, ConfigYamlError | ConfigValidationError]:
    """Parse ``text`` with the YAML safe loader.

    Empty, whitespace-only and comment-only documents yield an empty mapping.
    Scalars keep their YAML types, so ``version: 1.0`` maps to the float ``1.0``.
    Mapping keys are converted to strings at every level.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            ConfigYamlError(
                name=name,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            )
        )
    except ValueError as exc:
        # Timestamp-shaped scalars that are not real dates, e.g. 2024-13-45
        return Err(ConfigYamlError(name=name, message=f"Invalid scalar value: {exc}"))

    if data is None:
        return Ok({})

    if not isinstance(data, dict):
        return Err(
            ConfigValidationError(
                name=name,
                message=f"Configuration root must be a mapping of keys to values, got {type(data).__name__}.",
            )
        )

    return Ok(_stringify_keys(data))


def _stringify_keys(value: Any) -> Any:
    match value:
        case dict():
            return {str(key): _stringify_keys(item) for key, item in value.items()}
        case list():
            return [_stringify_keys(item) for item in value]
        case _:
            return value
