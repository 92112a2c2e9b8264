# SPDX-License-Identifier: MIT

import json
import logging
from typing import Any, Optional

from notedex.configuration import Store
from notedex.model.note import NoteIndex, NoteRecord
from notedex.repository.json_file import read_json, write_json
from notedex.repository.tag import TagRepository
from notedex.template.note import get_note_template

logger = logging.getLogger(__name__)


class IndexRepository:
    """The note index: title -> NoteRecord, persisted as index.json."""

    def __init__(self, store: Store, tag_repository: TagRepository) -> None:
        self.store = store
        self.tag_repository = tag_repository

    def load(self) -> NoteIndex:
        """
        Read the whole index.

        A missing or unparsable file reads as an empty index; a full reindex
        recovers from that state.
        """
        try:
            raw = read_json(self.store.index_path)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError:
            logger.warning(
                "unparsable %s, treating it as empty; run `notedex index` to rebuild",
                self.store.index_path,
            )
            return {}

        if not isinstance(raw, dict):
            logger.warning(
                "%s is not a JSON object, treating it as empty", self.store.index_path
            )
            return {}

        return {
            title: self.__convert_record_for_deserialization(title, record)
            for title, record in raw.items()
            if isinstance(record, dict)
        }

    def save(self, index: NoteIndex) -> None:
        write_json(
            self.store.index_path,
            {
                title: self.__convert_record_for_serialization(index[title])
                for title in sorted(index)
            },
        )

    def save_with_tags(self, index: NoteIndex) -> None:
        """Persist the index, then rebuild the tag index from it. Never split these."""
        self.save(index)
        self.tag_repository.rebuild(index)

    def upsert(self, title: str, record: NoteRecord) -> NoteIndex:
        index = self.load()
        index[title] = record
        self.save_with_tags(index)
        logger.info("indexed note %s", title)
        return index

    def get_note(self, title: str) -> Optional[NoteRecord]:
        return self.load().get(title)

    @staticmethod
    def lookup(index: NoteIndex, title: str) -> Optional[tuple[str, NoteRecord]]:
        """Exact title first, then the first title equal ignoring case."""
        if title in index:
            return title, index[title]
        folded = title.casefold()
        for key in sorted(index):
            if key.casefold() == folded:
                return key, index[key]
        return None

    def __convert_record_for_serialization(self, record: NoteRecord) -> dict[str, Any]:
        serializable: dict[str, Any] = {
            "filePath": record["file_path"],
            "title": record["title"],
            "created": record["created"],
            "modified": record["modified"],
        }
        if record["last_visited"]:
            serializable["lastVisited"] = record["last_visited"]
        serializable["wordCount"] = record["word_count"]
        serializable["charCount"] = record["char_count"]
        serializable["tags"] = list(record["tags"])
        return serializable

    def __convert_record_for_deserialization(
        self, title: str, raw: dict[str, Any]
    ) -> NoteRecord:
        record = get_note_template()
        record["file_path"] = str(raw.get("filePath") or "")
        record["title"] = str(raw.get("title") or title)
        record["created"] = str(raw.get("created") or "")
        record["modified"] = str(raw.get("modified") or "")
        record["last_visited"] = raw.get("lastVisited") or None
        record["word_count"] = int(raw.get("wordCount") or 0)
        record["char_count"] = int(raw.get("charCount") or 0)
        record["tags"] = [str(tag) for tag in raw.get("tags") or []]
        return record
