# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from notedex.service.trash import (
    delete_note,
    empty_trash,
    list_trashed,
    recover_note,
    search_trash,
)
from notedex.terminal.custom_typer import AliasedTyperGroup
from notedex.terminal.state import get_repositories
from notedex.view.views.title import titles_report

app = typer.Typer(cls=AliasedTyperGroup, help="Inspect or empty the trash.")


def delete(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Exact note title")],
) -> None:
    """Move a note to the trash."""
    delete_note(get_repositories(ctx), title)
    Console().print(f"[green]moved to trash[/green] {title}")


def recover(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Title of the trashed note")],
) -> None:
    """Move a note back out of the trash and index it again."""
    record = recover_note(get_repositories(ctx), title)
    Console().print(f"[green]recovered[/green] {record['title']}")


@app.callback(invoke_without_command=True)
def trash(ctx: typer.Context) -> None:
    """List the trash when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        list_(ctx)


@app.command("list, ls")
def list_(ctx: typer.Context) -> None:
    """List trashed notes."""
    repos = get_repositories(ctx)
    titles_report(str(repos.store.root), "trashed notes", list_trashed(repos))


@app.command("search, s")
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Case-insensitive substring")],
) -> None:
    """Search trashed notes by title."""
    repos = get_repositories(ctx)
    titles_report(str(repos.store.root), "trashed notes", search_trash(repos, query))


@app.command("empty")
def empty(
    ctx: typer.Context,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
    ] = False,
) -> None:
    """Permanently delete everything in the trash."""
    if not yes:
        typer.confirm("Permanently delete every note in the trash?", abort=True)
    count = empty_trash(get_repositories(ctx))
    Console().print(f"[green]deleted[/green] {count} file(s) from the trash")
