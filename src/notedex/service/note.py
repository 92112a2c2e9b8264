# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Callable, TypeAlias

from notedex import time
from notedex.errors import (
    ErrorCode,
    InvalidInputError,
    NoteConflictError,
    NoteNotFoundError,
    StorageError,
)
from notedex.lock import file_lock
from notedex.model.note import NoteRecord
from notedex.repository.repositories import Repositories
from notedex.service.index import refresh_note
from notedex.service.note_store import (
    format_tag_line,
    parse_tags,
    read_note_text,
    resolve_path,
    split_first_line,
    validate_note_name,
    write_tags,
)
from notedex.service.recent import get_recent_notes

logger = logging.getLogger(__name__)

QUICK_NOTE_TITLE = "quick"
MOST_RECENT_NOTE = "-"

OpenInEditor: TypeAlias = Callable[[Path], None]


def lookup_note(repos: Repositories, title: str) -> tuple[str, NoteRecord]:
    """
    Find a note by exact title, falling back to a case-insensitive match.

    Returns:
        The title as spelled in the index, and its record

    Raises:
        NoteNotFoundError: If neither lookup finds the note
    """
    found = repos.index.lookup(repos.index.load(), title)
    if found is None:
        raise NoteNotFoundError(title)
    return found


def resolve_note_name(repos: Repositories, name: str) -> str:
    """Expand ``-`` to the most recently visited note; any other name is returned as is."""
    if name != MOST_RECENT_NOTE:
        return name
    recent = get_recent_notes(repos, 1)
    if len(recent) == 0:
        raise NoteNotFoundError(name, "no notes have been indexed yet")
    return recent[0]["title"]


def get_note_info(repos: Repositories, title: str) -> NoteRecord:
    _, record = lookup_note(repos, resolve_note_name(repos, title))
    return record


def __create_file(path: Path, content: str = "") -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "x", encoding="utf-8") as note_file:
            note_file.write(content)
    except FileExistsError:
        return
    except OSError as e:
        raise StorageError("create note", str(path), e) from e
    logger.info("created note file %s", path)


def __note_path(repos: Repositories, title: str) -> Path:
    found = repos.index.lookup(repos.index.load(), title)
    if found is not None and found[1]["file_path"]:
        return Path(found[1]["file_path"])
    return resolve_path(repos.note_dir, title)


def create_or_open_note(
    repos: Repositories, title: str, open_in_editor: OpenInEditor
) -> NoteRecord:
    """
    Open a note in the editor, creating an empty file first if needed.

    The editor runs without the store lock held; the note is re-indexed
    under the lock once the editor exits, and its lastVisited stamp is set.
    """
    validate_note_name(title)
    path = __note_path(repos, title)
    __create_file(path)

    open_in_editor(path)

    with file_lock(repos.store.index_path):
        return refresh_note(repos, path, visited=True)


def open_quick_note(repos: Repositories, open_in_editor: OpenInEditor) -> NoteRecord:
    return create_or_open_note(repos, QUICK_NOTE_TITLE, open_in_editor)


def create_note_from_template(
    repos: Repositories,
    title: str,
    template_name: str,
    open_in_editor: OpenInEditor,
) -> NoteRecord:
    path = resolve_path(repos.note_dir, title)
    if path.exists() or repos.index.lookup(repos.index.load(), title) is not None:
        raise NoteConflictError(title)

    content = repos.templates.load_template(template_name)
    __create_file(path, content)
    logger.info("created note %s from template %s", title, template_name)

    open_in_editor(path)

    with file_lock(repos.store.index_path):
        return refresh_note(repos, path, visited=True)


def rename_note(repos: Repositories, old_title: str, new_title: str) -> NoteRecord:
    """
    Rename a note's file and index entry, carrying its pin along.

    A rename that only changes letter case is allowed when no other note
    already owns the new title or its file.

    Raises:
        InvalidInputError: If the new title is not a valid note name
        NoteNotFoundError: If the old title is not indexed
        NoteConflictError: If a note with the new title already exists
    """
    new_path = resolve_path(repos.note_dir, new_title)

    with file_lock(repos.store.index_path):
        index = repos.index.load()
        found = repos.index.lookup(index, old_title)
        if found is None:
            raise NoteNotFoundError(old_title)
        old_key, record = found
        if old_key == new_title:
            return record

        old_path = Path(record["file_path"])
        if new_title in index:
            raise NoteConflictError(new_title)
        # On a case-insensitive filesystem the new path may be the old file itself.
        if new_path.exists() and not (
            old_path.exists() and new_path.samefile(old_path)
        ):
            raise NoteConflictError(new_title)

        try:
            old_path.rename(new_path)
        except OSError as e:
            raise StorageError(
                "rename note", str(old_path), e, ErrorCode.STORAGE_MOVE_FAILED
            ) from e

        del index[old_key]
        record["title"] = new_title
        record["file_path"] = str(new_path)
        record["last_visited"] = time.now_stamp()
        index[new_title] = record
        repos.index.save_with_tags(index)

        pins = repos.pins.load()
        if old_key in pins:
            pins.discard(old_key)
            pins.add(new_title)
            repos.pins.save(pins)
            logger.info("moved pin from %s to %s", old_key, new_title)

    logger.info("renamed note %s to %s", old_key, new_title)
    return record


def add_tags_to_note(repos: Repositories, title: str, tags: list[str]) -> NoteRecord:
    """
    Merge tags into the note's first line and re-index it.

    Tags are normalized the same way a tag line is parsed. Existing tags keep
    their position; new ones are appended. A note without a tag line gets one
    inserted above its content.
    """
    new_tags = parse_tags(format_tag_line(tags))
    if len(new_tags) == 0:
        raise InvalidInputError("no usable tags given", ErrorCode.INVALID_TAGS, tags)

    with file_lock(repos.store.index_path):
        found = repos.index.lookup(repos.index.load(), title)
        if found is None:
            raise NoteNotFoundError(title)
        path = Path(found[1]["file_path"])

        first_line, _ = split_first_line(read_note_text(path))
        merged = parse_tags(first_line)
        for tag in new_tags:
            if tag not in merged:
                merged.append(tag)

        write_tags(path, merged)
        record = refresh_note(repos, path)

    logger.info("tagged note %s with %s", record["title"], ", ".join(new_tags))
    return record


def promote_quick_note(repos: Repositories, new_title: str) -> NoteRecord:
    """Move the quick note's content into a new note and leave the quick note empty."""
    quick_path = resolve_path(repos.note_dir, QUICK_NOTE_TITLE)
    new_path = resolve_path(repos.note_dir, new_title)

    with file_lock(repos.store.index_path):
        index = repos.index.load()
        if new_path.exists() or new_title in index:
            raise NoteConflictError(new_title)
        if not quick_path.is_file():
            raise NoteNotFoundError(
                QUICK_NOTE_TITLE, "there is no quick note to promote"
            )

        content = read_note_text(quick_path)
        __create_file(new_path, content)
        try:
            quick_path.write_text("", encoding="utf-8")
        except OSError as e:
            raise StorageError("clear quick note", str(quick_path), e) from e

        record = refresh_note(repos, new_path)
        if QUICK_NOTE_TITLE in index:
            refresh_note(repos, quick_path)

    logger.info("promoted quick note to %s", new_title)
    return record
