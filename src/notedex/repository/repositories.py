# SPDX-License-Identifier: MIT

from pathlib import Path

from notedex.configuration import Store
from notedex.repository.configuration import StoreConfigRepository
from notedex.repository.index import IndexRepository
from notedex.repository.pin import PinRepository
from notedex.repository.tag import TagRepository
from notedex.repository.template import TemplateRepository
from notedex.repository.trash import TrashRepository


class Repositories:
    """Every repository of one store, wired to the same Store handle."""

    def __init__(self, store: Store) -> None:
        self.store = store
        self.config = StoreConfigRepository(store)
        self.tags = TagRepository(store)
        self.index = IndexRepository(store, self.tags)
        self.pins = PinRepository(store)
        self.trash = TrashRepository(store)
        self.templates = TemplateRepository(store)

    @property
    def note_dir(self) -> Path:
        return Path(self.config.config["note_dir"]).expanduser()

    def initialize(self) -> None:
        """Create the store layout and default files that do not exist yet."""
        self.store.root.mkdir(parents=True, exist_ok=True)
        self.config.get_config()
        self.note_dir.mkdir(parents=True, exist_ok=True)
        self.store.trash_path.mkdir(parents=True, exist_ok=True)
        self.store.templates_path.mkdir(parents=True, exist_ok=True)
        if not self.store.index_path.is_file():
            self.index.save_with_tags({})
        if not self.store.pins_path.is_file():
            self.pins.save(set())
