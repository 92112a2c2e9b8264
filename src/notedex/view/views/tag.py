# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from notedex.model.tag import TagRecord
from notedex.view.views.header import header


def tags_report(store: str, report_name: str, tags: list[TagRecord]) -> None:
    header(store, report_name)

    tags_table = Table(box=box.SIMPLE)
    tags_table.add_column("tag")
    tags_table.add_column("count", justify="right")

    for tag in tags:
        tags_table.add_row(tag["tag"], str(tag["count"]))

    console = Console()
    console.print(tags_table)
