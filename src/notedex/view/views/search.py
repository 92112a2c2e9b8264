# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from notedex.model.search import SearchResult
from notedex.view.views.header import header


def search_report(
    store: str, report_name: str, results: list[SearchResult], show_score: bool = False
) -> None:
    header(store, report_name)

    console = Console()
    if len(results) == 0:
        console.print("[dim]no matching notes[/dim]")
        return

    results_table = Table(box=box.SIMPLE)
    results_table.add_column("title")
    if show_score:
        results_table.add_column("score", justify="right")
    results_table.add_column("file_path", style="dim")

    for result in results:
        row = [result["title"]]
        if show_score:
            row.append(str(result["score"]))
        row.append(result["file_path"])
        results_table.add_row(*row)

    console.print(results_table)
