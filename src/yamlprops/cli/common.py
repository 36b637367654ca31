"""Options and helpers shared by CLI commands."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import BaseModel
from result import Result

from yamlprops.api import YamlProperties
from yamlprops.registry import FileRegistryStore, RegistryDocument, get_registry
from yamlprops.settings import Settings, get_settings
from yamlprops.sources import GitSCMFetcher
from yamlprops.storage import StoreError

REGISTRY_FILE_ENV = "YAMLPROPS_REGISTRY_FILE"


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]
RegistryFileOption = Annotated[
    Path | None,
    typer.Option(
        "--registry-file",
        envvar=REGISTRY_FILE_ENV,
        help="Registry YAML file (defaults to ~/.config/yamlprops/registry.yaml).",
    ),
]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory used when resolving the project-local properties.",
    ),
]


def resolve_registry_path(registry_file: Path | None, settings: Settings | None = None) -> Path:
    settings = settings or get_settings()
    return registry_file.expanduser() if registry_file else settings.default_registry_path()


def open_store(registry_file: Path | None) -> FileRegistryStore:
    return FileRegistryStore(resolve_registry_path(registry_file))


def build_fetcher(settings: Settings | None = None) -> GitSCMFetcher:
    settings = settings or get_settings()
    return GitSCMFetcher(
        host=settings.scm.host,
        credentials=settings.scm.credentials,
        timeout=settings.scm.timeout,
    )


def open_properties(registry_file: Path | None) -> Result[YamlProperties, StoreError]:
    """Load the registry file into the process registry and wrap it for lookups."""
    registry = get_registry()
    return (
        open_store(registry_file)
        .load_into(registry)
        .map(lambda _: YamlProperties(registry, fetcher=build_fetcher()))
    )


def load_document_or_exit(store: FileRegistryStore) -> RegistryDocument:
    result = store.load()
    if result.is_err():
        handle_error(result.unwrap_err())
        raise typer.Exit(code=1)
    return result.unwrap()


def format_payload(payload: object, format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2, sort_keys=True, default=str)
    return yaml.safe_dump(payload, sort_keys=True, allow_unicode=True).rstrip("\n")


def handle_error(error: BaseModel) -> None:
    message = getattr(error, "message", str(error))

    path = getattr(error, "path", None)
    if isinstance(path, Path):
        message = f"{message} ({path})"

    line = getattr(error, "line", None)
    if line is not None:
        message = f"{message} at line {line}"

    cause = getattr(error, "cause", None)
    if cause:
        message = f"{message}: {cause}"

    typer.secho(message, err=True, fg=typer.colors.RED)


def warn(message: str) -> None:
    typer.secho(message, err=True, fg=typer.colors.YELLOW)


def note(message: str) -> None:
    typer.echo(message, err=True)
