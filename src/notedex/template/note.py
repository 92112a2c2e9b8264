# SPDX-License-Identifier: MIT

from notedex.model.note import NoteRecord


def get_note_template() -> NoteRecord:
    return {
        "file_path": "",
        "title": "",
        "created": "",
        "modified": "",
        "last_visited": None,
        "word_count": 0,
        "char_count": 0,
        "tags": [],
    }
