from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger

import yamlprops.settings as settings_module
from yamlprops.constants import APP_NAME
from yamlprops.registry import teardown_registry


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Iterator[None]:
    teardown_registry()
    settings_module._settings = None
    yield
    teardown_registry()
    settings_module._settings = None


@pytest.fixture
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Capture yamlprops log records emitted during the test."""
    records: list[dict[str, Any]] = []

    logger.enable(APP_NAME)
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    try:
        yield records
    finally:
        logger.remove(handler_id)
        logger.disable(APP_NAME)
