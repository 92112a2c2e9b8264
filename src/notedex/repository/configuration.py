# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from typing import Any, Optional

from notedex.configuration import Store
from notedex.model.store_config import StoreConfig
from notedex.repository.json_file import read_json, write_json
from notedex.template.store_config import DEFAULT_PAGE_SIZE, get_store_config_template

logger = logging.getLogger(__name__)


class StoreConfigRepository:
    def __init__(self, store: Store) -> None:
        self.store = store
        self._config: Optional[StoreConfig] = None

    @property
    def config(self) -> StoreConfig:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        try:
            raw = read_json(self.store.config_path)
        except FileNotFoundError:
            self._config = get_store_config_template()
            self.__save_data(self._config)
            return
        except json.JSONDecodeError:
            logger.warning(
                "unparsable %s, restoring defaults", self.store.config_path
            )
            self._config = get_store_config_template()
            self.__save_data(self._config)
            return

        self._config = self.__convert_config_for_deserialization(raw)

    def __save_data(self, config: StoreConfig) -> None:
        write_json(
            self.store.config_path, self.__convert_config_for_serialization(config)
        )

    def __convert_config_for_serialization(self, config: StoreConfig) -> dict[str, Any]:
        return {
            "noteDir": config["note_dir"],
            "editor": config["editor"],
            "defaultPageSize": config["default_page_size"],
        }

    def __convert_config_for_deserialization(self, raw: Any) -> StoreConfig:
        config = get_store_config_template()
        if not isinstance(raw, dict):
            return config
        if raw.get("noteDir"):
            config["note_dir"] = str(raw["noteDir"])
        if raw.get("editor"):
            config["editor"] = str(raw["editor"])
        if isinstance(raw.get("defaultPageSize"), int):
            config["default_page_size"] = raw["defaultPageSize"]
        return config

    def get_config(self) -> StoreConfig:
        return deepcopy(self.config)

    def page_size(self) -> int:
        size = self.config["default_page_size"]
        if size <= 0:
            return DEFAULT_PAGE_SIZE
        return size

    def update_config(
        self,
        note_dir: Optional[str] = None,
        editor: Optional[str] = None,
        default_page_size: Optional[int] = None,
    ) -> None:
        if note_dir is not None:
            self.config["note_dir"] = note_dir
        if editor is not None:
            self.config["editor"] = editor
        if default_page_size is not None:
            self.config["default_page_size"] = default_page_size
        self.__save_data(self.config)
