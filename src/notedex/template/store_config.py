# SPDX-License-Identifier: MIT

import os
from pathlib import Path

from notedex.model.store_config import StoreConfig

DEFAULT_PAGE_SIZE = 10


def get_store_config_template() -> StoreConfig:
    return {
        "note_dir": str(Path.home() / "notes"),
        "editor": os.environ.get("EDITOR", "vim"),
        "default_page_size": DEFAULT_PAGE_SIZE,
    }
