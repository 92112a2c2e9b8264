# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from notedex import time
from notedex.lock import file_lock
from notedex.model.note import NoteIndex, NoteRecord
from notedex.repository.repositories import Repositories
from notedex.service.note_store import NOTE_SUFFIX, build_metadata

logger = logging.getLogger(__name__)


def carry_over(record: NoteRecord, prior: Optional[NoteRecord]) -> NoteRecord:
    """Keep the timestamps a rescan cannot recover: created and lastVisited."""
    if prior is None:
        return record
    if prior["created"]:
        record["created"] = prior["created"]
    if prior["last_visited"]:
        record["last_visited"] = prior["last_visited"]
    return record


def refresh_note(repos: Repositories, path: Path, visited: bool = False) -> NoteRecord:
    """
    Rebuild one note's record from its file and upsert it, tags included.

    The caller holds the store lock.
    """
    record = build_metadata(path)
    record = carry_over(record, repos.index.get_note(record["title"]))
    if visited:
        record["last_visited"] = time.now_stamp()
    repos.index.upsert(record["title"], record)
    return record


def reindex_all(repos: Repositories, clear: bool = False) -> NoteIndex:
    """
    Rebuild the index and the tag index from every note file under the note directory.

    Each title already known keeps its recorded created and lastVisited
    stamps unless ``clear`` is set, in which case the existing index is
    ignored and every record starts fresh. A file that cannot be read aborts
    the whole reindex and nothing is written.

    Args:
        repos: The repositories of the store to reindex
        clear: Ignore the existing index; both files are replaced on success

    Returns:
        The new index
    """
    note_dir = repos.note_dir.resolve()
    with file_lock(repos.store.index_path):
        prior: NoteIndex = {} if clear else repos.index.load()

        index: NoteIndex = {}
        paths = sorted(note_dir.rglob(f"*{NOTE_SUFFIX}")) if note_dir.is_dir() else []
        for path in paths:
            if not path.is_file():
                continue
            record = build_metadata(path)
            title = record["title"]
            if title in index:
                logger.warning(
                    "duplicate note title %s at %s, keeping %s",
                    title,
                    path,
                    index[title]["file_path"],
                )
                continue
            index[title] = carry_over(record, prior.get(title))

        repos.index.save_with_tags(index)

    logger.info("reindexed %d notes from %s", len(index), note_dir)
    return index
