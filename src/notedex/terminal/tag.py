# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from notedex.service.tag import get_popular_tags, list_tags
from notedex.terminal.custom_typer import AliasedTyperGroup
from notedex.terminal.state import get_repositories, page_size
from notedex.view.views.tag import tags_report

app = typer.Typer(cls=AliasedTyperGroup, help="List tags and their note counts.")


@app.callback(invoke_without_command=True)
def tags(ctx: typer.Context) -> None:
    """List every tag when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        repos = get_repositories(ctx)
        tags_report(str(repos.store.root), "tags", list_tags(repos))


@app.command("popular, pop")
def popular(
    ctx: typer.Context,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Number of tags, 0 for all"),
    ] = None,
) -> None:
    """List the most used tags."""
    repos = get_repositories(ctx)
    tags_report(
        str(repos.store.root),
        "popular tags",
        get_popular_tags(repos, page_size(repos, limit)),
    )
