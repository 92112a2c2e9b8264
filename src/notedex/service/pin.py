# SPDX-License-Identifier: MIT

import logging

from notedex.errors import NoteNotFoundError
from notedex.lock import file_lock
from notedex.repository.repositories import Repositories

logger = logging.getLogger(__name__)


def pin_note(repos: Repositories, title: str) -> bool:
    """
    Pin an indexed note. The title must match exactly.

    Returns:
        True if the pin was added, False if the note was already pinned

    Raises:
        NoteNotFoundError: If the title is not in the index
    """
    with file_lock(repos.store.index_path):
        if title not in repos.index.load():
            raise NoteNotFoundError(title)
        pins = repos.pins.load()
        if title in pins:
            return False
        pins.add(title)
        repos.pins.save(pins)
    logger.info("pinned note %s", title)
    return True


def unpin_note(repos: Repositories, title: str) -> bool:
    """
    Unpin an indexed note. Unpinning a note that is not pinned is a no-op.

    Returns:
        True if a pin was removed
    """
    with file_lock(repos.store.index_path):
        if title not in repos.index.load():
            raise NoteNotFoundError(title)
        pins = repos.pins.load()
        if title not in pins:
            return False
        pins.discard(title)
        repos.pins.save(pins)
    logger.info("unpinned note %s", title)
    return True


def list_pinned_notes(repos: Repositories) -> list[str]:
    """
    Pinned titles as spelled in the index, sorted.

    A pin matching an index key exactly lists under that key; otherwise the
    first title equal ignoring case is used. Pins whose note is no longer
    indexed are left out.
    """
    index = repos.index.load()
    # Reverse order so the first title in sorted order wins a case collision.
    folded = {title.casefold(): title for title in sorted(index, reverse=True)}
    pinned = set()
    for pin in repos.pins.load():
        if pin in index:
            pinned.add(pin)
        elif pin.casefold() in folded:
            pinned.add(folded[pin.casefold()])
    return sorted(pinned)
