# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, TypedDict


class NoteRecord(TypedDict):
    file_path: str
    title: str
    created: str
    modified: str
    last_visited: Optional[str]
    word_count: int
    char_count: int
    tags: list[str]


NoteIndex: TypeAlias = dict[str, NoteRecord]
