"""Lookup commands: the query side of the registry."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from yamlprops.api import DEFAULT_CONFIGURATION_NOTICE, EMPTY_CONFIGURATION_WARNING, YamlProperties

from ..common import (
    FormatOption,
    OutputFormat,
    RegistryFileOption,
    format_payload,
    handle_error,
    note,
    open_properties,
    warn,
)


def get(
    name: Annotated[str | None, typer.Argument(help="Configuration name (omit to use the only configuration)")] = None,
    format: FormatOption = OutputFormat.YAML,
    raw: Annotated[bool, typer.Option("--raw", help="Print the YAML text as stored, unparsed")] = False,
    registry_file: RegistryFileOption = None,
) -> None:
    """Print a configuration by name, or the default configuration.

    Examples:

        # The only configuration in the registry
        yamlprops get

        # A named configuration as JSON
        yamlprops get deploy --format json
    """
    properties = _open_or_exit(registry_file)

    if name is None:
        note(DEFAULT_CONFIGURATION_NOTICE)

    if raw:
        match properties.lookup_text(name):
            case Ok(text):
                typer.echo(text)
            case Err(error):
                handle_error(error)
                raise typer.Exit(code=1)
        return

    match properties.lookup(name):
        case Ok(config_map):
            if not config_map:
                warn(f"Warning: {EMPTY_CONFIGURATION_WARNING}")
            typer.echo(format_payload(config_map, format))
        case Err(error):
            handle_error(error)
            raise typer.Exit(code=1)


def categories(registry_file: RegistryFileOption = None) -> None:
    """List the distinct configuration categories."""
    properties = _open_or_exit(registry_file)
    for category in sorted(properties.list_categories()):
        typer.echo(category)


def names(
    category: Annotated[str, typer.Argument(help="Category to list (exact, case-sensitive match)")],
    registry_file: RegistryFileOption = None,
) -> None:
    """List configuration names in a category, in registry order."""
    properties = _open_or_exit(registry_file)
    for name in properties.list_names_in_category(category):
        typer.echo(name)


def _open_or_exit(registry_file: Path | None) -> YamlProperties:
    match open_properties(registry_file):
        case Ok(properties):
            return properties
        case Err(error):
            handle_error(error)
            raise typer.Exit(code=1)
