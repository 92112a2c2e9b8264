# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "notedex"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
DEFAULT_STORE_PATH = platformdirs.user_data_path(APP_NAME)
LOG_PATH = platformdirs.user_log_path(APP_NAME)


class AppConfiguration(TypedDict):
    store_path: Optional[str]
    log_level: str
    log_path: Optional[str]


def get_app_configuration_template() -> AppConfiguration:
    return {"store_path": None, "log_level": "INFO", "log_path": None}


def load_app_configuration(config_path: Path = APP_CONFIG_PATH) -> AppConfiguration:
    """
    Load the application configuration, writing the defaults on first run.

    The application configuration only locates the store and the log files
    and sets the log level; everything about notes lives in the store's own
    config.json.
    """
    config = get_app_configuration_template()

    if not config_path.is_file():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(dump(dict(config), Dumper=Dumper))
        return config

    loaded = load(config_path.read_text(), Loader=Loader) or {}
    if loaded.get("store_path") is not None:
        config["store_path"] = str(loaded["store_path"])
    if loaded.get("log_level") is not None:
        config["log_level"] = str(loaded["log_level"]).upper()
    if loaded.get("log_path") is not None:
        config["log_path"] = str(loaded["log_path"])
    return config


def log_dir_from_app_configuration(config: AppConfiguration) -> Path:
    if config["log_path"] is not None:
        return Path(config["log_path"]).expanduser()
    return LOG_PATH


class Store:
    """
    Handle on one store directory and every path derived from it.

    Built once per invocation and handed to each repository, so nothing
    in the package reads a global store location.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root).expanduser()

    @classmethod
    def from_app_configuration(
        cls, config: AppConfiguration, override: Optional[Path] = None
    ) -> "Store":
        if override is not None:
            return cls(override)
        if config["store_path"] is not None:
            return cls(Path(config["store_path"]))
        return cls(DEFAULT_STORE_PATH)

    @property
    def config_path(self) -> Path:
        return self.root / "config.json"

    @property
    def index_path(self) -> Path:
        return self.root / "index.json"

    @property
    def tags_path(self) -> Path:
        return self.root / "tags.json"

    @property
    def pins_path(self) -> Path:
        return self.root / "pins.json"

    @property
    def trash_path(self) -> Path:
        return self.root / "trash"

    @property
    def templates_path(self) -> Path:
        return self.root / "templates"

    def __repr__(self) -> str:
        return f"Store({str(self.root)!r})"
