# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from notedex.service.template import delete_template, edit_template, rename_template
from notedex.terminal.custom_typer import AliasedTyperGroup
from notedex.terminal.state import get_editor, get_repositories
from notedex.view.views.title import titles_report

app = typer.Typer(
    cls=AliasedTyperGroup, no_args_is_help=True, help="Manage note templates."
)


@app.command("list, ls")
def list_(ctx: typer.Context) -> None:
    """List templates."""
    repos = get_repositories(ctx)
    titles_report(str(repos.store.root), "templates", repos.templates.list_templates())


@app.command("edit, e")
def edit(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Template name")],
) -> None:
    """Open a template in the editor, creating it if needed."""
    repos = get_repositories(ctx)
    edit_template(repos, name, get_editor(repos))


@app.command("delete, d")
def delete(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Template name")],
) -> None:
    """Delete a template."""
    delete_template(get_repositories(ctx), name)
    Console().print(f"[green]deleted template[/green] {name}")


@app.command("rename, mv")
def rename(
    ctx: typer.Context,
    old_name: Annotated[str, typer.Argument(help="Current name")],
    new_name: Annotated[str, typer.Argument(help="New name")],
) -> None:
    """Rename a template."""
    rename_template(get_repositories(ctx), old_name, new_name)
    Console().print(f"[green]renamed template[/green] {old_name} -> {new_name}")
