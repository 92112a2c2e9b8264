# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from notedex.view.views.header import header


def titles_report(store: str, report_name: str, titles: list[str]) -> None:
    """A one-column listing, used for pins, the trash and templates."""
    header(store, report_name)

    console = Console()
    if len(titles) == 0:
        console.print(f"[dim]no {report_name}[/dim]")
        return

    titles_table = Table(box=box.SIMPLE)
    titles_table.add_column("title")
    for title in titles:
        titles_table.add_row(title)

    console.print(titles_table)
