"""Outline file CLI commands.

Commands that work on the outline document without the terminal UI:
printing it, running the archive sweep, clearing archives and creating a
fresh file.
"""

import typer
from rich.console import Console

from outliner.application import archive_sweep, clean_archives
from outliner.domain.outline import Outline, todo_count
from outliner.infrastructure import OutlineRepository, now_local, now_or_utc
from outliner.interfaces.cli.common import (
    OutlinePath,
    open_outline,
    print_error,
    print_info,
    print_success,
    resolve_path,
    save_outline,
)
from outliner.interfaces.render import format_hierarchy, render_text

app = typer.Typer(help="Outline file commands")


@app.command("show")
def show(
    path: OutlinePath = None,
    plain: bool = typer.Option(False, "--plain", help="Print without colours"),
) -> None:
    """Print the outline as an indented list."""
    _, outline = open_outline(path, create=False)
    now = now_local()

    if not outline.groups:
        print_info("Outline is empty.")
        return

    if plain:
        typer.echo(format_hierarchy(outline, now), nl=False)
    else:
        Console().print(render_text(outline, now))


@app.command("status")
def status(path: OutlinePath = None) -> None:
    """Show how many todos are still open in each root group."""
    _, outline = open_outline(path, create=False)

    total = 0
    for group in outline.groups:
        count = todo_count(group)
        total += count
        typer.echo(f"{group.name}: {count} open")
    typer.echo(f"Total: {total} open, {len(outline.archive_groups)} archived groups")


@app.command("sweep")
def sweep(path: OutlinePath = None) -> None:
    """Archive completed todos older than the retention time."""
    repository, outline = open_outline(path, create=False)

    now = now_local()
    if now is None:
        print_error("Local time is unavailable; nothing archived.")
        raise typer.Exit(1)

    archived = archive_sweep(outline, now)
    if archived:
        save_outline(repository, outline)
    print_success(f"Archived {archived} completed todos.")


@app.command("clean")
def clean(
    path: OutlinePath = None,
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Permanently delete everything in the archives."""
    repository, outline = open_outline(path, create=False)

    if not yes:
        typer.confirm("Delete all archived todos and groups?", abort=True)

    dropped = clean_archives(outline)
    save_outline(repository, outline)
    print_success(f"Deleted {dropped} archived items.")


@app.command("init")
def init(
    path: OutlinePath = None,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing outline"),
) -> None:
    """Write the welcome outline."""
    repository = OutlineRepository(resolve_path(path))

    if repository.exists() and not force:
        print_error(f"{repository.path} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    save_outline(repository, Outline.welcome(now_or_utc()))
    print_success(f"Created {repository.path}")
