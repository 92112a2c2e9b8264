# SPDX-License-Identifier: MIT

from pathlib import Path

from notedex import time
from notedex.errors import ErrorCode, InvalidInputError
from notedex.model.note import NoteRecord
from notedex.model.search import DateRange, SearchResult
from notedex.repository.repositories import Repositories
from notedex.service.note_store import title_from_path


def __limit(results: list[SearchResult], limit: int) -> list[SearchResult]:
    if limit > 0:
        return results[:limit]
    return results


def __by_title(results: list[SearchResult]) -> list[SearchResult]:
    return sorted(results, key=lambda result: result["title"])


def __result(title: str, file_path: str, score: int = 1) -> SearchResult:
    return SearchResult(title=title, file_path=file_path, score=score)


def __normalize_tags(tags: list[str]) -> list[str]:
    normalized: list[str] = []
    for tag in tags:
        tag = tag.strip().lower()
        if tag != "" and tag not in normalized:
            normalized.append(tag)
    return normalized


def search_by_title(
    repos: Repositories, query: str, limit: int = 0
) -> list[SearchResult]:
    """Case-insensitive substring match against every indexed title, sorted by title."""
    folded = query.casefold()
    results = [
        __result(title, record["file_path"])
        for title, record in repos.index.load().items()
        if folded in title.casefold()
    ]
    return __limit(__by_title(results), limit)


def __count_tag_matches(repos: Repositories, tags: list[str]) -> dict[str, int]:
    tag_index = repos.tags.load()
    counts: dict[str, int] = {}
    for tag in tags:
        tag_record = tag_index.get(tag)
        if tag_record is None:
            continue
        for file_path in tag_record["notes"]:
            counts[file_path] = counts.get(file_path, 0) + 1
    return counts


def search_by_tags(
    repos: Repositories, tags: list[str], limit: int = 0
) -> list[SearchResult]:
    """
    Rank notes by how many of the requested tags they carry.

    A note carrying two of three requested tags scores 2. Notes carrying
    none are left out. Results are ordered by score, highest first, then by
    title.
    """
    counts = __count_tag_matches(repos, __normalize_tags(tags))
    results = [
        __result(title_from_path(Path(file_path)), file_path, score)
        for file_path, score in counts.items()
    ]
    results.sort(key=lambda result: (-result["score"], result["title"]))
    return __limit(results, limit)


def filter_by_all_tags(
    repos: Repositories, tags: list[str], limit: int = 0
) -> list[SearchResult]:
    """Notes carrying every one of the requested tags, sorted by title."""
    wanted = __normalize_tags(tags)
    if len(wanted) == 0:
        return []
    counts = __count_tag_matches(repos, wanted)
    results = [
        __result(title_from_path(Path(file_path)), file_path, score)
        for file_path, score in counts.items()
        if score == len(wanted)
    ]
    return __limit(__by_title(results), limit)


def __check_digits(value: str, specifier: str) -> None:
    if not value.isdigit() or not value.isascii():
        raise InvalidInputError(
            f"invalid date specifier: {specifier}",
            ErrorCode.INVALID_DATE_SPECIFIER,
            specifier,
        )


def parse_date_input(specifier: str) -> DateRange:
    """
    Expand a date specifier into the inclusive range of stamps it covers.

    Accepted forms are ``yy``, ``yymm``, ``yymmdd``, ``yymmdd.hh``,
    ``yymmdd.hhmm`` and ``yymmdd.hhmmss``. Years are taken as 20yy.

    Raises:
        InvalidInputError: If the specifier has another length, contains
            anything but digits and the ``.`` after the day, or names a
            month outside 1-12
    """
    specifier = specifier.strip()
    length = len(specifier)

    if length in (2, 4, 6):
        __check_digits(specifier, specifier)
    elif length in (9, 11, 13):
        if specifier[6] != ".":
            raise InvalidInputError(
                f"invalid date specifier: {specifier} (expected . after the day)",
                ErrorCode.INVALID_DATE_SPECIFIER,
                specifier,
            )
        __check_digits(specifier[:6] + specifier[7:], specifier)
    else:
        raise InvalidInputError(
            f"invalid date specifier: {specifier!r} "
            "(expected yy, yymm, yymmdd, yymmdd.hh, yymmdd.hhmm or yymmdd.hhmmss)",
            ErrorCode.INVALID_DATE_SPECIFIER,
            specifier,
        )

    if length == 2:
        return DateRange(f"{specifier}0101.000000", f"{specifier}1231.235959")

    month = int(specifier[2:4])
    if not 1 <= month <= 12:
        raise InvalidInputError(
            f"invalid month in date specifier: {specifier}",
            ErrorCode.INVALID_DATE_SPECIFIER,
            specifier,
        )

    match length:
        case 4:
            last_day = time.last_day_of_month(2000 + int(specifier[0:2]), month)
            return DateRange(
                f"{specifier}01.000000", f"{specifier}{last_day:02d}.235959"
            )
        case 6:
            return DateRange(f"{specifier}.000000", f"{specifier}.235959")
        case 9:
            return DateRange(f"{specifier}0000", f"{specifier}5959")
        case 11:
            return DateRange(f"{specifier}00", f"{specifier}59")
        case _:
            return DateRange(specifier, specifier)


def parse_date_range(specifiers: list[str]) -> DateRange:
    """One specifier gives its own range; two give the first's start and the second's end."""
    if len(specifiers) == 0 or len(specifiers) > 2:
        raise InvalidInputError(
            "expected one or two date specifiers",
            ErrorCode.INVALID_DATE_SPECIFIER,
            specifiers,
        )
    first = parse_date_input(specifiers[0])
    if len(specifiers) == 1:
        return first
    second = parse_date_input(specifiers[1])
    return DateRange(first.start, second.end)


def __stamp(record: NoteRecord, use_created: bool) -> str:
    if use_created:
        return record["created"]
    return record["modified"]


def search_by_date(
    repos: Repositories,
    specifiers: list[str],
    use_created: bool = False,
    limit: int = 0,
) -> list[SearchResult]:
    """
    Notes whose created or modified stamp falls inside the range, sorted by title.

    Stamps compare as strings since they are fixed width. Notes with no
    stamp in the chosen field are left out.
    """
    date_range = parse_date_range(specifiers)
    results = []
    for title, record in repos.index.load().items():
        stamp = __stamp(record, use_created)
        if stamp == "":
            continue
        if date_range.start <= stamp <= date_range.end:
            results.append(__result(title, record["file_path"]))
    return __limit(__by_title(results), limit)
