# SPDX-License-Identifier: MIT

import logging
import re
from typing import Any, Optional

import click
import typer
import typer.core
from rich.console import Console
from rich.markup import escape

from notedex.errors import NotedexError

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


class AliasedTyperGroup(typer.core.TyperGroup):
    """Group whose registered command names carry comma-separated aliases, e.g. ``"rename, mv"``."""

    _ALIAS_SEPARATOR = re.compile(r"\s*,\s*")

    def aliases(self) -> dict[str, str]:
        """Map every alias of every command to the name it is registered under."""
        table: dict[str, str] = {}
        for registered in self.commands:
            for alias in self._ALIAS_SEPARATOR.split(registered):
                table.setdefault(alias, registered)
        return table

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.aliases().get(cmd_name, cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""
        registered = self.aliases().get(name)
        # A bare alias of an already registered command is not added twice.
        if registered is not None and registered != name:
            logger.debug("skipping alias %s of command %s", name, registered)
            return
        super().add_command(cmd, name)


class NotedexTyperGroup(AliasedTyperGroup):
    """Root group: fixed command order in help, and errors rendered instead of tracebacks"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        desired_order = [
            "open, o",
            "quick, q",
            "promote",
            "info, i",
            "rename, mv",
            "tag",
            "tags, ts",
            "pin, p",
            "unpin, u",
            "pinned, pd",
            "delete, d",
            "recover",
            "trash",
            "search, s",
            "date",
            "recent, r",
            "index, x",
            "template",
            "config, c",
        ]

        result = [name for name in desired_order if name in self.commands]
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)
        return result

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except NotedexError as e:
            logger.debug("command failed: %s", e.to_dict())
            err_console.print(f"[red]error:[/red] {escape(e.message)}")
            raise typer.Exit(code=1) from e
