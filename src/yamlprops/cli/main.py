from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from yamlprops.common import LoggingConfig, create_logger, setup_cli_logging
from yamlprops.registry import FileRegistryStore
from yamlprops.settings import get_settings

from .commands import configs as configs_commands
from .commands import local as local_commands
from .commands import properties as properties_commands
from .common import REGISTRY_FILE_ENV, resolve_registry_path

logger = create_logger("cli")

app = typer.Typer(help="yamlprops command-line interface.")
app.command("get")(properties_commands.get)
app.command("categories")(properties_commands.categories)
app.command("names")(properties_commands.names)
app.add_typer(configs_commands.app, name="configs")
app.add_typer(local_commands.app, name="local")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _registry_file_from_args(args: Sequence[str]) -> Path | None:
    """The registry file the command will use: the last --registry-file, else the env var."""
    selected: str | None = None
    for index, arg in enumerate(args):
        if arg == "--registry-file" and index + 1 < len(args):
            selected = args[index + 1]
        elif arg.startswith("--registry-file="):
            selected = arg.partition("=")[2]

    selected = selected or os.getenv(REGISTRY_FILE_ENV)
    return Path(selected) if selected else None


def _setup_logging(args: Sequence[str]) -> None:
    settings = get_settings()
    store = FileRegistryStore(resolve_registry_path(_registry_file_from_args(args), settings))

    document = store.load().unwrap_or(None)
    logging_config = document.logging if document else LoggingConfig()

    if logging_config.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            directories=settings.to_app_directories(),
        )
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the yamlprops CLI."""
    _setup_logging(sys.argv[1:])
    app()
