# SPDX-License-Identifier: MIT

import typer

from notedex.terminal.state import APP_CONFIG_META_KEY, get_repositories
from notedex.view.views.config import config_report


def config(ctx: typer.Context) -> None:
    """Display the resolved configuration."""
    repos = get_repositories(ctx)
    config_report(
        ctx.meta[APP_CONFIG_META_KEY], repos.store, repos.config.get_config()
    )
