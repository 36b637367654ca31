from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError
from result import is_err, is_ok

from yamlprops.storage import (
    StoreReadError,
    StoreValidationError,
    StoreWriteError,
    StoreYamlError,
    describe_validation_error,
    load_model,
    save_model,
)


class Sample(BaseModel):
    name: str = "default"
    retries: int = 0


def test_load_valid_file(tmp_path: Path) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("name: web\nretries: 3\n", encoding="utf-8")

    result = load_model(path, Sample)

    assert is_ok(result)
    assert result.unwrap() == Sample(name="web", retries=3)


def test_empty_file_validates_as_empty_mapping(tmp_path: Path) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("", encoding="utf-8")

    assert load_model(path, Sample).unwrap() == Sample()


def test_missing_file_is_a_read_error(tmp_path: Path) -> None:
    result = load_model(tmp_path / "missing.yaml", Sample)

    assert is_err(result)
    assert isinstance(result.err_value, StoreReadError)


def test_yaml_error_has_one_based_position(tmp_path: Path) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("name: web\nretries: [1\n", encoding="utf-8")

    result = load_model(path, Sample)

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, StoreYamlError)
    assert error.line is not None and error.line >= 2


def test_non_mapping_root_is_a_validation_error(tmp_path: Path) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    result = load_model(path, Sample)

    assert is_err(result)
    assert isinstance(result.err_value, StoreValidationError)
    assert result.err_value.field is None


def test_schema_mismatch_names_the_field(tmp_path: Path) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("retries: many\n", encoding="utf-8")

    result = load_model(path, Sample)

    assert is_err(result)
    assert result.err_value.field == "retries"


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "sample.yaml"

    assert is_ok(save_model(path, Sample(name="web")))
    assert load_model(path, Sample).unwrap() == Sample(name="web")


def test_save_into_unwritable_location_is_a_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = save_model(blocker / "sample.yaml", Sample())

    assert is_err(result)
    assert isinstance(result.err_value, StoreWriteError)


def test_describe_validation_error_uses_first_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Sample.model_validate({"retries": "many"})

    field, message = describe_validation_error(exc_info.value)

    assert field == "retries"
    assert message


def test_invalid_timestamp_is_a_yaml_error(tmp_path: Path) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("name: 2024-13-45\n", encoding="utf-8")

    result = load_model(path, Sample)

    assert is_err(result)
    assert isinstance(result.err_value, StoreYamlError)
    assert result.err_value.line is None
