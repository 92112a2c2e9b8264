"""Tests for the derived tag index and tag queries."""

import json
from pathlib import Path

import pytest

from notedex.errors import CorruptStateError, ErrorCode
from notedex.model.note import NoteIndex
from notedex.repository.repositories import Repositories
from notedex.service.index import reindex_all
from notedex.service.note_store import build_metadata
from notedex.service.tag import get_popular_tags, list_tags, rank_by_popularity


def _write_note(directory: Path, name: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.md"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def index(repos: Repositories, note_dir: Path) -> NoteIndex:
    _write_note(note_dir, "a", ".work.urgent\nbody")
    _write_note(note_dir, "b", ".work.project\nbody")
    _write_note(note_dir, "c", ".personal\nbody")
    _write_note(note_dir, "d", "no tags here")
    return reindex_all(repos)


class TestRebuild:
    def test_count_matches_notes(self, repos: Repositories, index: NoteIndex):
        for record in repos.tags.load().values():
            assert record["count"] == len(record["notes"])

    def test_membership_matches_note_tags(self, repos: Repositories, index: NoteIndex):
        membership = sum(record["count"] for record in repos.tags.load().values())
        assert membership == sum(len(record["tags"]) for record in index.values())

    def test_notes_are_file_paths(self, repos: Repositories, index: NoteIndex):
        work = repos.tags.get_tag("work")
        assert work["notes"] == [index["a"]["file_path"], index["b"]["file_path"]]

    def test_rebuild_is_a_full_replacement(self, repos: Repositories, index: NoteIndex):
        del index["c"]
        repos.index.save_with_tags(index)
        assert repos.tags.get_tag("personal") is None

    def test_persisted_shape(self, repos: Repositories, index: NoteIndex):
        raw = json.loads(repos.store.tags_path.read_text(encoding="utf-8"))
        assert raw["personal"] == {
            "tag": "personal",
            "notes": [index["c"]["file_path"]],
            "count": 1,
        }

    def test_empty_index_gives_empty_tags(self, repos: Repositories):
        assert repos.tags.rebuild({}) == {}
        assert repos.tags.load() == {}


class TestCorruptTags:
    def test_unparsable_tags_file_raises(self, repos: Repositories):
        repos.store.tags_path.write_text("{oops", encoding="utf-8")
        with pytest.raises(CorruptStateError) as excinfo:
            repos.tags.load()
        assert excinfo.value.code == ErrorCode.CORRUPT_TAGS

    def test_missing_tags_file_is_empty(self, repos: Repositories):
        repos.store.tags_path.unlink()
        assert repos.tags.load() == {}

    def test_reindex_repairs_corrupt_tags(self, repos: Repositories, index: NoteIndex):
        repos.store.tags_path.write_text("{oops", encoding="utf-8")
        reindex_all(repos)
        assert repos.tags.get_tag("work")["count"] == 2


class TestStaleTagsAfterInterruptedWrite:
    def test_index_saved_without_rebuild_leaves_tags_stale_until_reindex(
        self, repos: Repositories, note_dir: Path, index: NoteIndex
    ):
        path = _write_note(note_dir, "e", ".fresh\nbody")
        index["e"] = build_metadata(path)
        # Index written but the process died before the tag rebuild.
        repos.index.save(index)

        assert "e" in repos.index.load()
        assert repos.tags.get_tag("fresh") is None

        reindex_all(repos)
        assert repos.tags.get_tag("fresh")["notes"] == [str(path)]


class TestTagQueries:
    def test_list_tags_is_sorted(self, repos: Repositories, index: NoteIndex):
        assert [record["tag"] for record in list_tags(repos)] == [
            "personal",
            "project",
            "urgent",
            "work",
        ]

    def test_popular_tags(self, repos: Repositories, index: NoteIndex):
        popular = get_popular_tags(repos, 2)
        assert [record["tag"] for record in popular] == ["work", "personal"]

    def test_popular_tags_without_limit(self, repos: Repositories, index: NoteIndex):
        assert len(get_popular_tags(repos, 0)) == 4

    def test_rank_by_popularity(self):
        counts = {"b": 3, "a": 3, "c": 5, "d": 1}
        assert rank_by_popularity(counts) == [("c", 5), ("a", 3), ("b", 3), ("d", 1)]
        assert rank_by_popularity(counts, 1) == [("c", 5)]
