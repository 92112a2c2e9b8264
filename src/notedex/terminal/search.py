# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from notedex.service.search import (
    filter_by_all_tags,
    search_by_date,
    search_by_tags,
    search_by_title,
)
from notedex.terminal.state import get_repositories, page_size
from notedex.view.views.search import search_report


def search(
    ctx: typer.Context,
    query: Annotated[
        Optional[str], typer.Argument(help="Case-insensitive title substring")
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-t", help="Search by tag; accepts multiple tag options"),
    ] = None,
    match_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Only notes carrying every given tag"),
    ] = False,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Number of results, 0 for all"),
    ] = None,
) -> None:
    """
    Search notes by title, or by tags when -t is given.

    Tag search ranks notes by how many of the tags they carry; --all keeps
    only notes carrying all of them.
    """
    repos = get_repositories(ctx)
    store = str(repos.store.root)
    size = page_size(repos, limit)

    if tags:
        if match_all:
            results = filter_by_all_tags(repos, tags, size)
            search_report(store, "notes with all tags", results)
        else:
            results = search_by_tags(repos, tags, size)
            search_report(store, "notes by tag", results, show_score=True)
        return

    if query is None:
        raise typer.BadParameter("give a title query or at least one --tag")
    search_report(store, f"search: {query}", search_by_title(repos, query, size))


def date(
    ctx: typer.Context,
    specifiers: Annotated[
        list[str],
        typer.Argument(
            help="yy, yymm, yymmdd, yymmdd.hh, yymmdd.hhmm or yymmdd.hhmmss; "
            "two specifiers form a range"
        ),
    ],
    created: Annotated[
        bool,
        typer.Option("--created/--modified", help="Which timestamp to match"),
    ] = False,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Number of results, 0 for all"),
    ] = None,
) -> None:
    """Search notes by created or modified date."""
    repos = get_repositories(ctx)
    results = search_by_date(repos, specifiers, created, page_size(repos, limit))
    field = "created" if created else "modified"
    search_report(
        str(repos.store.root), f"{field}: {' '.join(specifiers)}", results
    )
