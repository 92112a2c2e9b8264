# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from notedex.model.note import NoteRecord
from notedex.view.util import format_stamp, format_tags
from notedex.view.views.header import header


def single_note_report(store: str, note: NoteRecord, pinned: bool = False) -> None:
    header(store, "note")

    note_table = Table(box=box.SIMPLE)
    note_table.add_column("property")
    note_table.add_column("value")

    note_table.add_row("title", note["title"])
    note_table.add_row("file_path", note["file_path"])
    note_table.add_row("created", format_stamp(note["created"]))
    note_table.add_row("modified", format_stamp(note["modified"]))
    note_table.add_row("last_visited", format_stamp(note["last_visited"]))
    note_table.add_row("word_count", str(note["word_count"]))
    note_table.add_row("char_count", str(note["char_count"]))
    note_table.add_row("tags", format_tags(note["tags"]))
    note_table.add_row("pinned", "✓" if pinned else "")

    console = Console()
    console.print(note_table)


def notes_report(store: str, report_name: str, notes: list[NoteRecord]) -> None:
    header(store, report_name)

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("title")
    notes_table.add_column("last_visited")
    notes_table.add_column("modified")
    notes_table.add_column("tags")

    for note in notes:
        notes_table.add_row(
            note["title"],
            note["last_visited"] or "",
            note["modified"],
            format_tags(note["tags"]),
        )

    console = Console()
    console.print(notes_table)
