# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable, Optional

import typer

from notedex.repository.repositories import Repositories
from notedex.terminal.editor import editor_launcher

APP_CONFIG_META_KEY = "notedex.app_config"


def get_repositories(ctx: typer.Context) -> Repositories:
    """The store's repositories, attached to the root context by the app callback."""
    repos = ctx.find_object(Repositories)
    if repos is None:
        raise RuntimeError("no store attached to the command context")
    return repos


def get_editor(repos: Repositories) -> Callable[[Path], None]:
    return editor_launcher(repos.config.config["editor"])


def page_size(repos: Repositories, limit: Optional[int]) -> int:
    """The explicit ``-n`` limit if given, otherwise the store's default page size."""
    if limit is None:
        return repos.config.page_size()
    return limit
