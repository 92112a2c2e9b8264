# SPDX-License-Identifier: MIT

from notedex.model.note import NoteRecord
from notedex.repository.repositories import Repositories


def recency_key(record: NoteRecord) -> str:
    return record["last_visited"] or record["modified"]


def get_recent_notes(repos: Repositories, limit: int = 0) -> list[NoteRecord]:
    """
    Notes ordered by lastVisited, or modified where never visited, newest first.

    Ties are broken by title. A limit of zero or less returns every note.
    """
    notes = sorted(repos.index.load().values(), key=lambda record: record["title"])
    notes.sort(key=recency_key, reverse=True)
    if limit > 0:
        return notes[:limit]
    return notes
