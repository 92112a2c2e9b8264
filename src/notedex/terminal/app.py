# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from notedex.configuration import (
    APP_CONFIG_PATH,
    Store,
    load_app_configuration,
    log_dir_from_app_configuration,
)
from notedex.logging_setup import setup_logging
from notedex.repository.repositories import Repositories
from notedex.terminal import tag, template, trash
from notedex.terminal.configuration import config
from notedex.terminal.custom_typer import NotedexTyperGroup
from notedex.terminal.index import index
from notedex.terminal.note import info, open_note, promote, quick, recent, rename
from notedex.terminal.note import tag as tag_note
from notedex.terminal.pin import pin, pinned, unpin
from notedex.terminal.search import date, search
from notedex.terminal.state import APP_CONFIG_META_KEY
from notedex.view import state as view_state

app = typer.Typer(
    cls=NotedexTyperGroup,
    help="notedex - plain-text notes with a cached index, tags, pins and trash",
    no_args_is_help=True,
)
app.command(name="open, o")(open_note)
app.command(name="quick, q")(quick)
app.command(name="promote")(promote)
app.command(name="info, i")(info)
app.command(name="rename, mv")(rename)
app.command(name="tag")(tag_note)
app.add_typer(tag.app, name="tags, ts")
app.command(name="pin, p")(pin)
app.command(name="unpin, u")(unpin)
app.command(name="pinned, pd")(pinned)
app.command(name="delete, d")(trash.delete)
app.command(name="recover")(trash.recover)
app.add_typer(trash.app, name="trash")
app.command(name="search, s")(search)
app.command(name="date")(date)
app.command(name="recent, r")(recent)
app.command(name="index, x")(index)
app.add_typer(template.app, name="template")
app.command(name="config, c")(config)


@app.callback()
def main_callback(
    ctx: typer.Context,
    store: Annotated[
        Optional[Path],
        typer.Option(
            "--store",
            "-S",
            envvar="NOTEDEX_STORE",
            help="Store directory to use instead of the configured one",
        ),
    ] = None,
    config_path: Annotated[
        Path,
        typer.Option(
            "--config",
            envvar="NOTEDEX_CONFIG",
            help="Application config file",
        ),
    ] = APP_CONFIG_PATH,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Suppress header output in reports"),
    ] = False,
) -> None:
    """
    notedex - plain-text notes with a cached index, tags, pins and trash

    Global options that apply to all commands.
    """
    app_config = load_app_configuration(config_path)
    setup_logging(app_config["log_level"], log_dir_from_app_configuration(app_config))

    repos = Repositories(Store.from_app_configuration(app_config, store))
    repos.initialize()

    ctx.obj = repos
    ctx.meta[APP_CONFIG_META_KEY] = app_config
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
