"""Tests for the application config and the store config."""

import json
from pathlib import Path

import yaml

from notedex.configuration import (
    LOG_PATH,
    Store,
    load_app_configuration,
    log_dir_from_app_configuration,
)
from notedex.repository.repositories import Repositories
from notedex.template.store_config import DEFAULT_PAGE_SIZE


class TestAppConfiguration:
    def test_writes_defaults_on_first_run(self, tmp_path: Path):
        config_path = tmp_path / "cfg" / "config.yaml"
        config = load_app_configuration(config_path)

        assert config == {"store_path": None, "log_level": "INFO", "log_path": None}
        assert yaml.safe_load(config_path.read_text()) == config

    def test_reads_values(self, tmp_path: Path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            yaml.safe_dump(
                {"store_path": "/data/notes", "log_level": "debug", "log_path": "/logs"}
            )
        )
        config = load_app_configuration(config_path)

        assert config["store_path"] == "/data/notes"
        assert config["log_level"] == "DEBUG"
        assert log_dir_from_app_configuration(config) == Path("/logs")

    def test_store_override_wins(self, tmp_path: Path):
        config = load_app_configuration(tmp_path / "config.yaml")
        config["store_path"] = str(tmp_path / "configured")

        assert Store.from_app_configuration(config).root == tmp_path / "configured"
        assert (
            Store.from_app_configuration(config, tmp_path / "override").root
            == tmp_path / "override"
        )

    def test_default_log_dir(self, tmp_path: Path):
        config = load_app_configuration(tmp_path / "config.yaml")
        assert log_dir_from_app_configuration(config) == LOG_PATH


class TestStoreLayout:
    def test_derived_paths(self, tmp_path: Path):
        store = Store(tmp_path)
        assert store.index_path == tmp_path / "index.json"
        assert store.tags_path == tmp_path / "tags.json"
        assert store.pins_path == tmp_path / "pins.json"
        assert store.trash_path == tmp_path / "trash"
        assert store.templates_path == tmp_path / "templates"

    def test_initialize_creates_everything(self, repos: Repositories):
        store = repos.store
        assert repos.note_dir.is_dir()
        assert store.trash_path.is_dir()
        assert store.templates_path.is_dir()
        assert json.loads(store.index_path.read_text(encoding="utf-8")) == {}
        assert json.loads(store.tags_path.read_text(encoding="utf-8")) == {}
        assert json.loads(store.pins_path.read_text(encoding="utf-8")) == {}

    def test_two_stores_are_independent(self, tmp_path: Path):
        first = Repositories(Store(tmp_path / "one"))
        second = Repositories(Store(tmp_path / "two"))
        first.config.update_config(note_dir=str(tmp_path / "n1"))
        second.config.update_config(note_dir=str(tmp_path / "n2"))
        first.initialize()
        second.initialize()

        assert first.note_dir != second.note_dir
        assert first.store.index_path != second.store.index_path


class TestStoreConfig:
    def test_defaults_written_when_missing(self, store: Store):
        config = Repositories(store).config.get_config()

        raw = json.loads(store.config_path.read_text(encoding="utf-8"))
        assert raw == {
            "noteDir": config["note_dir"],
            "editor": config["editor"],
            "defaultPageSize": DEFAULT_PAGE_SIZE,
        }

    def test_corrupt_file_is_replaced_with_defaults(self, store: Store):
        store.root.mkdir(parents=True)
        store.config_path.write_text("{{{", encoding="utf-8")

        config = Repositories(store).config.get_config()

        assert config["default_page_size"] == DEFAULT_PAGE_SIZE
        assert json.loads(store.config_path.read_text(encoding="utf-8"))["editor"]

    def test_non_positive_page_size_reads_as_default(self, store: Store):
        store.root.mkdir(parents=True)
        store.config_path.write_text(
            json.dumps({"noteDir": "/tmp/n", "editor": "vi", "defaultPageSize": 0}),
            encoding="utf-8",
        )
        repos = Repositories(store)
        assert repos.config.page_size() == DEFAULT_PAGE_SIZE
        assert repos.config.get_config()["editor"] == "vi"
