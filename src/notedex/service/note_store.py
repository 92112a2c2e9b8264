# SPDX-License-Identifier: MIT

"""Translate titles to note files and derive metadata from file content."""

import re
from pathlib import Path

from notedex import time
from notedex.errors import ErrorCode, InvalidInputError, StorageError
from notedex.model.note import NoteRecord
from notedex.template.note import get_note_template

NOTE_SUFFIX = ".md"

# Command names and aliases of the CLI; a note may not shadow any of them.
# "quick" is left out so the quick note itself stays a valid name.
RESERVED_WORDS = frozenset(
    {
        "open", "o",
        "q",
        "promote",
        "info", "i",
        "rename", "mv",
        "tag", "tags", "ts", "popular",
        "pin", "p",
        "unpin", "u",
        "pinned", "pd",
        "delete", "d",
        "recover",
        "trash",
        "search", "s",
        "date",
        "recent", "r",
        "index", "x",
        "template",
        "config", "c",
        "help", "h",
        "version",
    }
)  # fmt: skip

_TAG_MARKUP_RE = re.compile(r"[#\[\]|]")


def validate_note_name(title: str) -> None:
    """
    Reject names that cannot be a single file directly inside the note directory.

    Raises:
        InvalidInputError: If the name is empty, reserved, absolute, or
            contains a path separator, ``..``, a leading ``-`` or a NUL byte
    """
    if title.strip() == "":
        raise InvalidInputError(
            "note name cannot be empty", ErrorCode.INVALID_NOTE_NAME, title
        )
    if title in RESERVED_WORDS:
        raise InvalidInputError(
            f"'{title}' is a reserved command or alias and cannot be used as a note name",
            ErrorCode.RESERVED_NOTE_NAME,
            title,
        )
    if Path(title).is_absolute():
        raise InvalidInputError(
            "note name cannot be an absolute path",
            ErrorCode.PATH_ESCAPES_NOTE_DIR,
            title,
        )
    if "/" in title or "\\" in title or ".." in title:
        raise InvalidInputError(
            "note name cannot contain /, \\ or ..",
            ErrorCode.PATH_ESCAPES_NOTE_DIR,
            title,
        )
    if title.startswith("-"):
        raise InvalidInputError(
            "note name cannot start with -", ErrorCode.INVALID_NOTE_NAME, title
        )
    if "\x00" in title:
        raise InvalidInputError(
            "note name cannot contain null bytes", ErrorCode.INVALID_NOTE_NAME, title
        )


def resolve_path(note_dir: Path, title: str) -> Path:
    validate_note_name(title)
    base = note_dir.expanduser().resolve()
    path = (base / f"{title}{NOTE_SUFFIX}").resolve()
    if path.parent != base:
        raise InvalidInputError(
            "note path escapes the note directory",
            ErrorCode.PATH_ESCAPES_NOTE_DIR,
            title,
        )
    return path


def title_from_path(path: Path) -> str:
    return path.name.removesuffix(NOTE_SUFFIX)


def parse_tags(line: str) -> list[str]:
    """
    Parse a tag line such as ``.work.Urgent . #project``.

    Only a line starting with ``.`` is a tag line. Markup characters
    ``# [ ] |`` are dropped, segments are lowercased and trimmed, empty
    segments are skipped and repeats keep their first position.
    """
    if not line.startswith("."):
        return []
    clean = _TAG_MARKUP_RE.sub("", line)
    tags: list[str] = []
    for part in clean.split("."):
        tag = part.strip().lower()
        if tag != "" and tag not in tags:
            tags.append(tag)
    return tags


def format_tag_line(tags: list[str]) -> str:
    return "." + ".".join(tags)


def split_first_line(text: str) -> tuple[str, str]:
    first_line, _, remainder = text.partition("\n")
    return first_line.rstrip("\r"), remainder


def read_note_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(
            "read note", str(path), e, ErrorCode.STORAGE_READ_FAILED
        ) from e


def build_metadata(path: Path) -> NoteRecord:
    """
    Build a fresh record from the file's content and filesystem times.

    The first line is reserved for tags, so word and character counts only
    cover the lines after it. Nothing is written.
    """
    text = read_note_text(path)
    try:
        stat_result = path.stat()
    except OSError as e:
        raise StorageError(
            "stat note", str(path), e, ErrorCode.STORAGE_READ_FAILED
        ) from e

    first_line, remainder = split_first_line(text)

    record = get_note_template()
    record["file_path"] = str(path)
    record["title"] = title_from_path(path)
    record["created"] = time.birth_stamp(stat_result)
    record["modified"] = time.modified_stamp(stat_result)
    record["word_count"] = len(remainder.split())
    record["char_count"] = len(remainder)
    record["tags"] = parse_tags(first_line)
    return record


def write_tags(path: Path, tags: list[str]) -> None:
    """Replace the note's tag line, or insert one if the first line is not a tag line."""
    text = read_note_text(path)
    first_line, remainder = split_first_line(text)
    if first_line.startswith("."):
        body = remainder
    else:
        body = text
    try:
        path.write_text(f"{format_tag_line(tags)}\n{body}", encoding="utf-8")
    except OSError as e:
        raise StorageError("write note", str(path), e) from e
