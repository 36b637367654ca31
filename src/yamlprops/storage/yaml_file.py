"""Load and save pydantic models as YAML files."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError
from result import Err, Ok, Result

from yamlprops.common import create_logger

from .models import StoreError, StoreReadError, StoreValidationError, StoreWriteError, StoreYamlError

logger = create_logger("storage")


def load_model[M: BaseModel](path: Path, model_cls: type[M]) -> Result[M, StoreError]:
    """Read ``path`` and validate it as ``model_cls``. An empty file validates as ``{}``."""
    logger.debug("Loading YAML file", path=str(path), model=model_cls.__name__)

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("YAML file read error", path=str(path), error=str(exc))
        return Err(StoreReadError(path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        logger.error("YAML parse error", path=str(path), line=line, column=column, error=str(exc))
        return Err(
            StoreYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            )
        )
    except ValueError as exc:
        logger.error("YAML scalar error", path=str(path), error=str(exc))
        return Err(StoreYamlError(path=path, message=f"Invalid scalar value: {exc}"))

    if data is None:
        data = {}

    if not isinstance(data, dict):
        logger.error("YAML file root must be a mapping", path=str(path))
        return Err(
            StoreValidationError(
                path=path,
                field=None,
                message="File root must be a mapping of keys to values.",
            )
        )

    try:
        return Ok(model_cls.model_validate(data))
    except ValidationError as exc:
        field, message = describe_validation_error(exc)
        logger.error("YAML file validation error", path=str(path), field=field, error=message)
        return Err(StoreValidationError(path=path, field=field, message=message))


def save_model(path: Path, model: BaseModel) -> Result[None, StoreError]:
    data = model.model_dump(mode="json")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
    except OSError as exc:
        logger.error("YAML file write error", path=str(path), error=str(exc))
        return Err(StoreWriteError(path=path, message=str(exc)))

    logger.debug("YAML file saved", path=str(path))
    return Ok(None)


def describe_validation_error(error: ValidationError) -> tuple[str | None, str]:
    """Return the dotted location and message of the first validation error."""
    details = error.errors()
    if not details:
        return None, str(error)

    first = details[0]
    loc = first.get("loc") or ()
    field = ".".join(str(part) for part in loc) or None
    return field, first.get("msg", str(error))
