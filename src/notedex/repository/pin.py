# SPDX-License-Identifier: MIT

import json
import logging

from notedex.configuration import Store
from notedex.repository.json_file import read_json, write_json

logger = logging.getLogger(__name__)


class PinRepository:
    """Pinned titles, persisted as a presence-only JSON object: {title: {}}."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def load(self) -> set[str]:
        try:
            raw = read_json(self.store.pins_path)
        except FileNotFoundError:
            return set()
        except json.JSONDecodeError:
            logger.warning("unparsable %s, treating it as empty", self.store.pins_path)
            return set()

        if not isinstance(raw, dict):
            logger.warning(
                "%s is not a JSON object, treating it as empty", self.store.pins_path
            )
            return set()
        return set(raw)

    def save(self, pins: set[str]) -> None:
        write_json(self.store.pins_path, {title: {} for title in sorted(pins)})

    def is_pinned(self, title: str) -> bool:
        return title in self.load()
