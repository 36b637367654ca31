"""CLI commands for managing the registry file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from yamlprops.common import create_logger
from yamlprops.registry import Config, FileRegistryStore
from yamlprops.sources import ConfigSource, ManualConfigSource, SCMConfigSource
from yamlprops.storage import describe_validation_error

from ..common import RegistryFileOption, handle_error, load_document_or_exit, open_store

logger = create_logger("cli.configs")

CategoryOption = Annotated[str, typer.Option("--category", "-c", help="Category of the configuration")]

app = typer.Typer(
    help="Manage the configurations stored in the registry file.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def _configs_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_configs(registry_file: RegistryFileOption = None) -> None:
    """List configurations as name, category and source, one per line."""
    document = load_document_or_exit(open_store(registry_file))
    for config in document.configs:
        typer.echo(f"{config.name}\t{config.category}\t{config.source.describe()}")


@app.command("add-manual")
def add_manual(
    name: Annotated[str, typer.Argument(help="Unique configuration name")],
    category: CategoryOption = "",
    text: Annotated[str | None, typer.Option("--text", help="YAML text")] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", exists=True, dir_okay=False, readable=True, help="Read the YAML text from a file"),
    ] = None,
    registry_file: RegistryFileOption = None,
) -> None:
    """Add a configuration whose YAML text is stored in the registry.

    Examples:

        yamlprops configs add-manual deploy --category prod --text "replicas: 3"

        yamlprops configs add-manual deploy --file deploy.yaml
    """
    if text is not None and file is not None:
        typer.secho("Use either --text or --file, not both.", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2)

    yaml_text = file.read_text(encoding="utf-8") if file is not None else (text or "")
    _add(open_store(registry_file), name, category, ManualConfigSource(text=yaml_text))


@app.command("add-scm")
def add_scm(
    name: Annotated[str, typer.Argument(help="Unique configuration name")],
    repository: Annotated[str, typer.Option("--repository", help="Repository name")],
    owner: Annotated[str, typer.Option("--owner", help="Repository owner or organization")],
    path: Annotated[str, typer.Option("--path", help="File path inside the repository")],
    credential_id: Annotated[str, typer.Option("--credential-id", help="Credential used to read the repository")],
    branch: Annotated[str, typer.Option("--branch", help="Branch to read")] = "main",
    category: CategoryOption = "",
    registry_file: RegistryFileOption = None,
) -> None:
    """Add a configuration read from a file in a git repository."""
    try:
        source = SCMConfigSource(
            repository=repository,
            owner=owner,
            branch=branch,
            credential_id=credential_id,
            path=path,
        )
    except ValidationError as exc:
        field, message = describe_validation_error(exc)
        typer.secho(f"Invalid {field or 'source'}: {message}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    _add(open_store(registry_file), name, category, source)


@app.command("remove")
def remove(
    name: Annotated[str, typer.Argument(help="Configuration name to remove")],
    registry_file: RegistryFileOption = None,
) -> None:
    """Remove every configuration with the given name."""
    store = open_store(registry_file)
    document = load_document_or_exit(store)

    remaining = [config for config in document.configs if config.name != name]
    if len(remaining) == len(document.configs):
        typer.secho(f"No configuration named '{name}'", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    result = store.save_configs(remaining)
    if result.is_err():
        handle_error(result.unwrap_err())
        raise typer.Exit(code=1)

    logger.info("Configuration removed", name=name)
    typer.secho(f"✓ Removed '{name}'", fg=typer.colors.GREEN)


def _add(store: FileRegistryStore, name: str, category: str, source: ConfigSource) -> None:
    document = load_document_or_exit(store)

    if any(config.name == name for config in document.configs):
        typer.secho(f"A configuration named '{name}' already exists", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        config = Config(name=name, category=category, source=source)
    except ValidationError as exc:
        field, message = describe_validation_error(exc)
        typer.secho(f"Invalid {field or 'configuration'}: {message}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    result = store.save_configs([*document.configs, config])
    if result.is_err():
        handle_error(result.unwrap_err())
        raise typer.Exit(code=1)

    logger.info("Configuration added", name=name, category=category, source=source.describe())
    typer.secho(f"✓ Added '{name}' ({source.describe()})", fg=typer.colors.GREEN)
