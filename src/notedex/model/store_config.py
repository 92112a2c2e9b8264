# SPDX-License-Identifier: MIT

from typing import TypedDict


class StoreConfig(TypedDict):
    note_dir: str
    editor: str
    default_page_size: int
