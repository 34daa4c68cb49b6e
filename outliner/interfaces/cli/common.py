"""Shared utilities for outliner CLI commands.

- Outline file resolution and loading
- Formatted output helpers (error, success, info)
- Logging setup
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from outliner.domain.outline import Outline
from outliner.domain.shared import Err
from outliner.global_config import OUTLINE_FILE_ENV, default_outline_path
from outliner.infrastructure import OutlineRepository, now_or_utc

# Reusable outline file argument for CLI commands
# Usage: def my_command(path: OutlinePath = None) -> None:
OutlinePath = Annotated[Optional[Path], typer.Argument(
    help=f"Outline file (or set {OUTLINE_FILE_ENV}; default ~/.outliner/outline.json)",
    envvar=OUTLINE_FILE_ENV,
    show_default=False,
)]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def print_error(msg: str) -> None:
    """Print a formatted error message."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.CYAN))


def configure_logging(log_file: Path | None, verbose: bool = False) -> None:
    """Send log records to ``log_file`` (the TUI owns the terminal).

    Without a log file only warnings and errors are shown, on stderr.
    """
    level = logging.DEBUG if verbose else logging.INFO
    if log_file is not None:
        logging.basicConfig(filename=str(log_file), level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def resolve_path(path: Path | None) -> Path:
    return path if path is not None else default_outline_path()


def open_outline(path: Path | None, create: bool = True) -> tuple[OutlineRepository, Outline]:
    """Load the outline at ``path``.

    A missing file is replaced by the welcome outline when ``create`` is set.

    Raises:
        typer.Exit: If the outline cannot be loaded.
    """
    repository = OutlineRepository(resolve_path(path))

    if create:
        result = repository.load_or_create(now_or_utc())
    else:
        result = repository.load()

    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return repository, result.value


def save_outline(repository: OutlineRepository, outline: Outline) -> None:
    """Persist the outline.

    Raises:
        typer.Exit: If the outline cannot be written.
    """
    result = repository.save(outline)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
