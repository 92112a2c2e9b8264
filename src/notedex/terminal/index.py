# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from notedex.service.index import reindex_all
from notedex.terminal.state import get_repositories


def index(
    ctx: typer.Context,
    clear: Annotated[
        bool,
        typer.Option(
            "--clear", help="Ignore the existing index, dropping stamps"
        ),
    ] = False,
) -> None:
    """Rebuild the index and tag index from the note directory."""
    repos = get_repositories(ctx)
    rebuilt = reindex_all(repos, clear=clear)
    Console().print(f"[green]indexed[/green] {len(rebuilt)} note(s) in {repos.note_dir}")
