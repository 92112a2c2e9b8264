# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from notedex.service.note import (
    add_tags_to_note,
    create_note_from_template,
    create_or_open_note,
    get_note_info,
    open_quick_note,
    promote_quick_note,
    rename_note,
    resolve_note_name,
)
from notedex.service.recent import get_recent_notes
from notedex.terminal.state import get_editor, get_repositories, page_size
from notedex.view.views.note import notes_report, single_note_report


def open_note(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Note title, or - for the most recent note")],
    template: Annotated[
        Optional[str],
        typer.Option(
            "--template", "-T", help="Create a new note from this template"
        ),
    ] = None,
) -> None:
    """Create or open a note in the editor."""
    repos = get_repositories(ctx)
    editor = get_editor(repos)

    if template is not None:
        record = create_note_from_template(repos, title, template, editor)
    else:
        record = create_or_open_note(repos, resolve_note_name(repos, title), editor)

    Console().print(f"[green]saved[/green] {record['title']}")


def quick(ctx: typer.Context) -> None:
    """Open the quick note."""
    repos = get_repositories(ctx)
    open_quick_note(repos, get_editor(repos))


def promote(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Title of the new note")],
) -> None:
    """Move the quick note's content into a new note and clear the quick note."""
    repos = get_repositories(ctx)
    record = promote_quick_note(repos, title)
    Console().print(f"[green]promoted[/green] quick note to {record['title']}")


def info(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Note title, or - for the most recent note")],
) -> None:
    """Show a note's indexed metadata."""
    repos = get_repositories(ctx)
    record = get_note_info(repos, title)
    single_note_report(
        str(repos.store.root), record, pinned=repos.pins.is_pinned(record["title"])
    )


def rename(
    ctx: typer.Context,
    old_title: Annotated[str, typer.Argument(help="Current title")],
    new_title: Annotated[str, typer.Argument(help="New title")],
) -> None:
    """Rename a note, keeping its pin."""
    repos = get_repositories(ctx)
    record = rename_note(repos, old_title, new_title)
    Console().print(f"[green]renamed[/green] {old_title} -> {record['title']}")


def tag(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Note title")],
    tags: Annotated[
        list[str],
        typer.Option("--tag", "-t", help="accepts multiple tag options"),
    ],
) -> None:
    """Add tags to a note's tag line."""
    repos = get_repositories(ctx)
    record = add_tags_to_note(repos, title, tags)
    Console().print(
        f"[green]tagged[/green] {record['title']}: {', '.join(record['tags'])}"
    )


def recent(
    ctx: typer.Context,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Number of notes, 0 for all"),
    ] = None,
) -> None:
    """List notes by when they were last visited or modified."""
    repos = get_repositories(ctx)
    notes = get_recent_notes(repos, page_size(repos, limit))
    notes_report(str(repos.store.root), "recent", notes)
