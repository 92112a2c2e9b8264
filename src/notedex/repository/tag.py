# SPDX-License-Identifier: MIT

import json
import logging
from typing import Any, Optional

from notedex.configuration import Store
from notedex.errors import CorruptStateError, ErrorCode
from notedex.model.note import NoteIndex
from notedex.model.tag import TagIndex, TagRecord
from notedex.repository.json_file import read_json, write_json

logger = logging.getLogger(__name__)


class TagRepository:
    """
    The tag index: tag -> notes carrying it and their count.

    Wholly derived from the note index. ``rebuild`` is the only writer and
    always recomputes everything, so the two files cannot drift apart as
    long as every index write is followed by a rebuild.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    def load(self) -> TagIndex:
        try:
            raw = read_json(self.store.tags_path)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            raise CorruptStateError(
                str(self.store.tags_path),
                "tags file is unparsable; run `notedex index` to rebuild it",
                ErrorCode.CORRUPT_TAGS,
            ) from e

        if not isinstance(raw, dict):
            raise CorruptStateError(
                str(self.store.tags_path),
                "tags file is not a JSON object; run `notedex index` to rebuild it",
                ErrorCode.CORRUPT_TAGS,
            )
        return {
            tag: self.__convert_tag_for_deserialization(tag, record)
            for tag, record in raw.items()
        }

    def __convert_tag_for_deserialization(self, tag: str, record: Any) -> TagRecord:
        notes: list[str] = []
        if isinstance(record, dict):
            notes = [str(note) for note in record.get("notes") or []]
        return {"tag": tag, "notes": notes, "count": len(notes)}

    def rebuild(self, index: NoteIndex) -> TagIndex:
        tags: TagIndex = {}
        for title in sorted(index):
            record = index[title]
            for tag in record["tags"]:
                tag_record = tags.setdefault(
                    tag, {"tag": tag, "notes": [], "count": 0}
                )
                tag_record["notes"].append(record["file_path"])
                tag_record["count"] += 1

        write_json(
            self.store.tags_path, {tag: dict(tags[tag]) for tag in sorted(tags)}
        )
        logger.debug(
            "rebuilt tag index: %d tags from %d notes", len(tags), len(index)
        )
        return tags

    def get_tag(self, tag: str) -> Optional[TagRecord]:
        return self.load().get(tag)

    def get_all_tags(self) -> list[str]:
        return sorted(self.load())
