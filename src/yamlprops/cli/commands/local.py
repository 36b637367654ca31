"""CLI commands for the project-local (job/branch scoped) properties."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from yamlprops.api import EMPTY_CONFIGURATION_WARNING, YamlProperties
from yamlprops.common import get_project_root, resolve_working_directory
from yamlprops.registry import ConfigRegistry
from yamlprops.scoped import PropertyScope, ScopedProperties, load_scoped_properties, save_scoped_properties
from yamlprops.settings import get_settings
from yamlprops.sources import ManualConfigSource

from ..common import (
    FormatOption,
    OutputFormat,
    WorkingDirOption,
    build_fetcher,
    format_payload,
    handle_error,
    warn,
)

app = typer.Typer(
    help="Inspect and set the properties attached to the current project.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def _local_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    format: FormatOption = OutputFormat.YAML,
    working_dir: WorkingDirOption = None,
) -> None:
    """Print the parsed local properties, or {} when the project has none."""
    settings = get_settings()
    directories = settings.to_app_directories()

    load_result = load_scoped_properties(working_dir, directories, settings.paths.scoped_filename)
    if load_result.is_err():
        handle_error(load_result.unwrap_err())
        raise typer.Exit(code=1)

    holder = load_result.unwrap()
    properties = YamlProperties(ConfigRegistry(), fetcher=build_fetcher(settings))

    match properties.lookup_scoped(holder):
        case Ok(config_map):
            if holder is not None and not config_map:
                warn(f"Warning: {EMPTY_CONFIGURATION_WARNING}")
            typer.echo(format_payload(config_map, format))
        case Err(error):
            handle_error(error)
            raise typer.Exit(code=1)


@app.command("set")
def set_local(
    text: Annotated[str, typer.Option("--text", help="YAML text")],
    scope: Annotated[
        PropertyScope,
        typer.Option("--scope", "-s", case_sensitive=False, help="What the properties are attached to"),
    ] = PropertyScope.JOB,
    owner: Annotated[str, typer.Option("--owner", help="Job or branch name")] = "",
    working_dir: WorkingDirOption = None,
) -> None:
    """Write manual local properties for the enclosing project (or the working directory)."""
    settings = get_settings()
    directories = settings.to_app_directories()
    start_dir = resolve_working_directory(working_dir)
    project_root: Path = get_project_root(start_dir, directories) or start_dir

    holder = ScopedProperties(scope=scope, owner=owner, source=ManualConfigSource(text=text))

    match save_scoped_properties(project_root, directories, settings.paths.scoped_filename, holder):
        case Ok(path):
            typer.secho(f"✓ Local properties written to {path}", fg=typer.colors.GREEN)
        case Err(error):
            handle_error(error)
            raise typer.Exit(code=1)
