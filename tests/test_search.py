"""Tests for title, tag and date queries."""

import os
from pathlib import Path

import pendulum
import pytest

from notedex.errors import ErrorCode, InvalidInputError
from notedex.model.search import DateRange
from notedex.repository.repositories import Repositories
from notedex.service.index import reindex_all
from notedex.service.recent import get_recent_notes
from notedex.service.search import (
    filter_by_all_tags,
    parse_date_input,
    parse_date_range,
    search_by_date,
    search_by_tags,
    search_by_title,
)


def _write_note(directory: Path, name: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.md"
    path.write_text(content, encoding="utf-8")
    return path


def _set_mtime(path: Path, *when: int) -> None:
    timestamp = pendulum.datetime(*when, tz="local").timestamp()
    os.utime(path, (timestamp, timestamp))


@pytest.fixture()
def tagged(repos: Repositories, note_dir: Path) -> Repositories:
    _write_note(note_dir, "A", ".work.urgent\nbody")
    _write_note(note_dir, "B", ".work.project\nbody")
    _write_note(note_dir, "C", ".personal\nbody")
    reindex_all(repos)
    return repos


class TestTitleSearch:
    def test_case_insensitive_substring(self, repos: Repositories, note_dir: Path):
        _write_note(note_dir, "Meeting Notes", "x")
        _write_note(note_dir, "team meeting", "x")
        _write_note(note_dir, "groceries", "x")
        reindex_all(repos)

        results = search_by_title(repos, "MEET")
        assert [r["title"] for r in results] == ["Meeting Notes", "team meeting"]
        assert all(r["score"] == 1 for r in results)

    def test_limit(self, repos: Repositories, note_dir: Path):
        for name in ("n1", "n2", "n3"):
            _write_note(note_dir, name, "x")
        reindex_all(repos)

        assert len(search_by_title(repos, "n", limit=2)) == 2
        assert len(search_by_title(repos, "n", limit=0)) == 3


class TestTagSearch:
    def test_scores_by_number_of_matching_tags(self, tagged: Repositories):
        results = search_by_tags(tagged, ["work", "urgent"])
        assert [(r["title"], r["score"]) for r in results] == [("A", 2), ("B", 1)]

    def test_query_tags_are_normalized(self, tagged: Repositories):
        results = search_by_tags(tagged, [" WORK", "work", "Urgent"])
        assert [(r["title"], r["score"]) for r in results] == [("A", 2), ("B", 1)]

    def test_unknown_tag_matches_nothing(self, tagged: Repositories):
        assert search_by_tags(tagged, ["nope"]) == []

    def test_filter_by_all_tags_is_strict(self, tagged: Repositories):
        assert [r["title"] for r in filter_by_all_tags(tagged, ["work", "urgent"])] == [
            "A"
        ]
        assert [r["title"] for r in filter_by_all_tags(tagged, ["work"])] == ["A", "B"]
        assert filter_by_all_tags(tagged, ["work", "nope"]) == []
        assert filter_by_all_tags(tagged, []) == []


class TestParseDateInput:
    def test_year(self):
        assert parse_date_input("24") == DateRange("240101.000000", "241231.235959")

    def test_leap_february(self):
        assert parse_date_input("2402").end == "240229.235959"

    def test_common_february(self):
        assert parse_date_input("2502").end == "250228.235959"

    def test_century_rule(self):
        # 2000 is divisible by 400
        assert parse_date_input("0002").end == "000229.235959"

    def test_thirty_day_month(self):
        assert parse_date_input("2404") == DateRange("240401.000000", "240430.235959")

    def test_day(self):
        assert parse_date_input("240315") == DateRange("240315.000000", "240315.235959")

    def test_hour(self):
        assert parse_date_input("240315.09") == DateRange(
            "240315.090000", "240315.095959"
        )

    def test_minute(self):
        assert parse_date_input("240315.0930") == DateRange(
            "240315.093000", "240315.093059"
        )

    def test_second(self):
        assert parse_date_input("240315.093015") == DateRange(
            "240315.093015", "240315.093015"
        )

    @pytest.mark.parametrize(
        "specifier",
        ["", "2", "243", "24a1", "2401.5", "240315x09", "240315.0x", "2413", "2400"],
    )
    def test_rejects_malformed(self, specifier: str):
        with pytest.raises(InvalidInputError) as excinfo:
            parse_date_input(specifier)
        assert excinfo.value.code == ErrorCode.INVALID_DATE_SPECIFIER

    def test_two_specifiers_form_one_range(self):
        assert parse_date_range(["2401", "2403"]) == DateRange(
            "240101.000000", "240331.235959"
        )

    def test_range_needs_one_or_two(self):
        with pytest.raises(InvalidInputError):
            parse_date_range([])
        with pytest.raises(InvalidInputError):
            parse_date_range(["24", "25", "26"])


class TestDateSearch:
    @pytest.fixture()
    def dated(self, repos: Repositories, note_dir: Path) -> Repositories:
        _set_mtime(_write_note(note_dir, "jan", "x"), 2024, 1, 15, 10, 0, 0)
        _set_mtime(_write_note(note_dir, "feb", "x"), 2024, 2, 29, 23, 59, 59)
        _set_mtime(_write_note(note_dir, "mar", "x"), 2024, 3, 1, 0, 0, 0)
        reindex_all(repos)
        return repos

    def test_month(self, dated: Repositories):
        assert [r["title"] for r in search_by_date(dated, ["2402"])] == ["feb"]

    def test_range_is_inclusive(self, dated: Repositories):
        results = search_by_date(dated, ["2401", "240301"])
        assert [r["title"] for r in results] == ["feb", "jan", "mar"]

    def test_created_field(self, dated: Repositories):
        index = dated.index.load()
        index["jan"]["created"] = "230601.120000"
        dated.index.save_with_tags(index)

        assert [r["title"] for r in search_by_date(dated, ["23"], use_created=True)] == [
            "jan"
        ]
        assert search_by_date(dated, ["23"]) == []

    def test_empty_stamp_is_excluded(self, dated: Repositories):
        index = dated.index.load()
        index["jan"]["modified"] = ""
        dated.index.save_with_tags(index)

        assert search_by_date(dated, ["24"], limit=0) == search_by_date(
            dated, ["2402", "2403"]
        )


class TestRecentNotes:
    def test_last_visited_wins_over_modified(self, repos: Repositories, note_dir: Path):
        _set_mtime(_write_note(note_dir, "old", "x"), 2023, 1, 1, 0, 0, 0)
        _set_mtime(_write_note(note_dir, "new", "x"), 2024, 6, 1, 0, 0, 0)
        _set_mtime(_write_note(note_dir, "mid", "x"), 2024, 1, 1, 0, 0, 0)
        index = reindex_all(repos)
        index["old"]["last_visited"] = "240701.000000"
        repos.index.save_with_tags(index)

        assert [r["title"] for r in get_recent_notes(repos)] == ["old", "new", "mid"]
        assert [r["title"] for r in get_recent_notes(repos, 1)] == ["old"]
