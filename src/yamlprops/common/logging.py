"""Loguru setup for the yamlprops CLI and for library callers.

The package logs under the ``yamlprops`` name and is silent until either
``setup_cli_logging`` (rotating file, used by the CLI entrypoint) or
``enable_library_logging`` (stderr, for embedding applications) turns it on.
"""

import sys
from pathlib import Path
from typing import Any, Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from yamlprops.constants import APP_NAME

from .models import AppDirectories, AppInfo
from .paths import get_data_directory

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

_TEXT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[scope]: <16} | {message} | {extra}\n{exception}"
)


class LoggingConfig(BaseModel):
    """``logging`` section of the registry document."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    log_level: LogLevel = "INFO"
    log_file: str | None = Field(default=None, description="Defaults to <data dir>/logs/yamlprops.log")
    rotation: str = "1 MB"
    retention: str = "7 days"
    format: Literal["json", "text"] = "text"

    def resolve_log_file(self, directories: AppDirectories) -> Path:
        if self.log_file:
            return Path(self.log_file).expanduser()
        return get_data_directory(directories) / "logs" / f"{APP_NAME}.log"


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, directories: AppDirectories) -> int:
    """Route all records to the configured log file and return the handler id."""
    log_file = config.resolve_log_file(directories)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    sink_options: dict[str, Any] = {
        "level": config.log_level,
        "rotation": config.rotation,
        "retention": config.retention,
        "diagnose": app_info.environment == "dev",
    }
    if config.format == "json":
        sink_options["serialize"] = True
    else:
        sink_options["format"] = _TEXT_FORMAT

    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})
    handler_id = logger.add(log_file, **sink_options)

    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO") -> int:
    """Send yamlprops records to stderr, replacing any existing handlers."""
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": APP_NAME})
    return logger.add(sys.stderr, level=level, format=_TEXT_FORMAT, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)
