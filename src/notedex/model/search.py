# SPDX-License-Identifier: MIT

from typing import NamedTuple, TypedDict


class SearchResult(TypedDict):
    title: str
    file_path: str
    score: int


class DateRange(NamedTuple):
    """Inclusive bounds, both in YYMMDD.HHMMSS form."""

    start: str
    end: str
