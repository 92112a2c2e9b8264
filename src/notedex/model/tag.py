# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict


class TagRecord(TypedDict):
    tag: str
    notes: list[str]
    count: int


TagIndex: TypeAlias = dict[str, TagRecord]
