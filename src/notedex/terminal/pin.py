# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from notedex.service.pin import list_pinned_notes, pin_note, unpin_note
from notedex.terminal.state import get_repositories
from notedex.view.views.title import titles_report


def pin(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Exact note title")],
) -> None:
    """Pin a note."""
    if pin_note(get_repositories(ctx), title):
        Console().print(f"[green]pinned[/green] {title}")
    else:
        Console().print(f"{title} is already pinned")


def unpin(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Exact note title")],
) -> None:
    """Unpin a note."""
    if unpin_note(get_repositories(ctx), title):
        Console().print(f"[green]unpinned[/green] {title}")
    else:
        Console().print(f"{title} was not pinned")


def pinned(ctx: typer.Context) -> None:
    """List pinned notes."""
    repos = get_repositories(ctx)
    titles_report(str(repos.store.root), "pinned notes", list_pinned_notes(repos))
