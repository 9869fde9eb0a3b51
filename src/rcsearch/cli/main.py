"""CLI commands for rcsearch."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from rcsearch.core.exceptions import RcSearchError


app = typer.Typer(
    name="rcsearch",
    help="Find and load a tool's configuration by searching up the directory tree.",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every file that is read.",
    ),
) -> None:
    """Configure logging for all commands."""
    if not verbose:
        return
    logger = logging.getLogger("rcsearch")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.command()
def search(
    module_name: str = typer.Argument(..., help="Name of the tool whose config to find."),
    start_dir: str | None = typer.Argument(
        None,
        help="Directory to start searching from. Defaults to current directory.",
    ),
    stop_dir: str | None = typer.Option(
        None,
        "--stop-dir",
        "-s",
        envvar="RCSEARCH_STOP_DIR",
        help="Highest directory to search. Defaults to the filesystem root.",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Load exactly this file instead of searching.",
    ),
    rc_extensions: bool = typer.Option(
        False,
        "--rc-extensions",
        help="Also look for .<name>rc.json, .yaml, .yml and .js files.",
    ),
    rc_strict_json: bool = typer.Option(
        False,
        "--rc-strict-json",
        help="Parse the .<name>rc file as strict JSON instead of YAML.",
    ),
    package_prop: str | None = typer.Option(
        None,
        "--package-prop",
        help="Key to read from package.json. Defaults to the module name.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as a JSON object.",
    ),
) -> None:
    """Search for a configuration file and print what was found."""
    from rcsearch.config import create_explorer

    explorer = create_explorer(
        module_name,
        stop_dir=stop_dir,
        config_path=config,
        rc_extensions=rc_extensions,
        rc_strict_json=rc_strict_json,
        package_prop=package_prop,
        cache=False,
    )

    try:
        result = explorer.search_sync(start_dir)
    except RcSearchError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.recovery_hint:
            typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(1) from None

    if result is None:
        typer.echo(f"No configuration found for '{module_name}'.")
        raise typer.Exit(1)

    if as_json:
        payload = {"filepath": str(result.filepath), "config": result.config}
        typer.echo(json.dumps(payload, indent=2, default=str))
        return

    typer.echo(f"Found: {result.filepath}")
    typer.echo(json.dumps(result.config, indent=2, default=str))


@app.command()
def candidates(
    module_name: str = typer.Argument(..., help="Name of the tool whose config to find."),
    directory: str | None = typer.Argument(
        None,
        help="Directory to list candidates for. Defaults to current directory.",
    ),
    rc_extensions: bool = typer.Option(
        False,
        "--rc-extensions",
        help="Include the .<name>rc.json, .yaml, .yml and .js variants.",
    ),
    package_prop: str | None = typer.Option(
        None,
        "--package-prop",
        help="Key to read from package.json. Defaults to the module name.",
    ),
) -> None:
    """List the files searched in a directory, in the order they are tried."""
    from rcsearch.core.candidates import candidates_for
    from rcsearch.core.models import SearchOptions, absolute_path

    options = SearchOptions(
        module_name=module_name,
        rc_extensions=rc_extensions,
        package_prop=package_prop,
    )
    target = absolute_path(directory if directory is not None else Path.cwd())

    table = Table()
    table.add_column("#", justify="right")
    table.add_column("File")
    table.add_column("Format")
    table.add_column("Exists")

    for i, candidate in enumerate(candidates_for(target, options), 1):
        fmt = candidate.tag.value
        if candidate.extraction_key:
            fmt = f"{fmt} [{candidate.extraction_key}]"
        exists = "yes" if candidate.path.is_file() else "-"
        table.add_row(str(i), escape(candidate.path.name), escape(fmt), exists)

    console = Console(force_terminal=True)
    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()
