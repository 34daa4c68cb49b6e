"""CLI interface for the outliner using Typer.

Usage:
    outliner run            # Open the outline in the terminal UI
    outliner show           # Print the outline
    outliner outline sweep  # Archive old completed todos
    outliner outline clean  # Delete archived items

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from pathlib import Path
from typing import Optional

import typer

from outliner import __version__
from outliner.interfaces.cli.commands import outline
from outliner.interfaces.cli.common import (
    OutlinePath,
    configure_logging,
    open_outline,
)

app = typer.Typer(
    name="outliner",
    help="Collapsible outline of groups and todos",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"outliner version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Outliner - groups and todos in a collapsible terminal outline."""
    pass


app.add_typer(outline.app, name="outline")


@app.command("run")
def run(
    path: OutlinePath = None,
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write log records to this file"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug records"),
) -> None:
    """Open the outline in the terminal UI."""
    configure_logging(log_file, verbose)
    repository, document = open_outline(path)

    from outliner.tui.app import OutlineApp

    OutlineApp(repository, document).run()


@app.command("show")
def show(
    path: OutlinePath = None,
    plain: bool = typer.Option(False, "--plain", help="Print without colours"),
) -> None:
    """Print the outline (shortcut for 'outline show')."""
    outline.show(path=path, plain=plain)


@app.command("sweep")
def sweep(path: OutlinePath = None) -> None:
    """Archive old completed todos (shortcut for 'outline sweep')."""
    outline.sweep(path=path)


__all__ = ["app"]
