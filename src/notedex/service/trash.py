# SPDX-License-Identifier: MIT

"""Moving notes into the trash and back, and purging it."""

import logging
from pathlib import Path

from notedex.errors import ErrorCode, NoteConflictError, NoteNotFoundError
from notedex.lock import file_lock
from notedex.model.note import NoteRecord
from notedex.repository.repositories import Repositories
from notedex.service.note_store import build_metadata, resolve_path

logger = logging.getLogger(__name__)


def delete_note(repos: Repositories, title: str) -> Path:
    """
    Move a note's file into the trash and forget it.

    The title must match exactly. The note's index entry, its tag index
    contributions and its pin are all removed. The pin is not restored by
    a later recover.

    Returns:
        Where the file now lives in the trash
    """
    with file_lock(repos.store.index_path):
        index = repos.index.load()
        record = index.get(title)
        if record is None:
            raise NoteNotFoundError(title)

        trashed = repos.trash.move_in(Path(record["file_path"]))

        pins = repos.pins.load()
        if title in pins:
            pins.discard(title)
            repos.pins.save(pins)

        del index[title]
        repos.index.save_with_tags(index)

    logger.info("deleted note %s", title)
    return trashed


def recover_note(repos: Repositories, title: str) -> NoteRecord:
    """
    Move a trashed note back into the note directory and index it afresh.

    Every field of the new record is recomputed from the file, so created,
    lastVisited and any pin from before the delete are gone.

    Raises:
        NoteNotFoundError: If ``<title>.md`` is not in the trash
        NoteConflictError: If a note already lives at the destination
    """
    destination = resolve_path(repos.note_dir, title)

    with file_lock(repos.store.index_path):
        if not repos.trash.contains(title):
            raise NoteNotFoundError(
                title,
                f"note not found in trash: {title}",
                ErrorCode.TRASHED_NOTE_NOT_FOUND,
            )
        index = repos.index.load()
        if destination.exists() or title in index:
            raise NoteConflictError(title)

        repos.trash.move_out(title, destination)
        record = build_metadata(destination)
        index[record["title"]] = record
        repos.index.save_with_tags(index)

    logger.info("recovered note %s", title)
    return record


def list_trashed(repos: Repositories) -> list[str]:
    return repos.trash.list_titles()


def search_trash(repos: Repositories, query: str) -> list[str]:
    folded = query.casefold()
    return [title for title in repos.trash.list_titles() if folded in title.casefold()]


def empty_trash(repos: Repositories) -> int:
    """Permanently delete everything in the trash and return how many files went."""
    with file_lock(repos.store.index_path):
        return repos.trash.purge()
