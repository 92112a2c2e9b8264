"""End-to-end tests of the command line through typer's CliRunner."""

from pathlib import Path
from typing import Callable

import pytest
import typer
import yaml
from click.testing import Result
from typer.testing import CliRunner

from notedex.configuration import Store
from notedex.repository.repositories import Repositories
from notedex.terminal.app import app

runner = CliRunner()

Invoke = Callable[..., Result]


def _write_note(directory: Path, name: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.md"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def cli_store(tmp_path: Path) -> Repositories:
    repos = Repositories(Store(tmp_path / "store"))
    repos.config.update_config(note_dir=str(tmp_path / "notes"), editor="true")
    repos.initialize()
    return repos


@pytest.fixture()
def invoke(tmp_path: Path, cli_store: Repositories) -> Invoke:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "store_path": str(cli_store.store.root),
                "log_level": "DEBUG",
                "log_path": str(tmp_path / "logs"),
            }
        )
    )

    def run(*args: str, input: str | None = None) -> Result:
        return runner.invoke(
            app, ["--config", str(config_path), "--no-header", *args], input=input
        )

    return run


@pytest.fixture()
def notes(cli_store: Repositories, invoke: Invoke) -> Path:
    note_dir = cli_store.note_dir
    _write_note(note_dir, "alpha", ".work.urgent\nfirst note\n")
    _write_note(note_dir, "beta", ".work\nsecond note\n")
    _write_note(note_dir, "gamma", "no tags\n")
    result = invoke("index")
    assert result.exit_code == 0, result.output
    return note_dir


class TestIndexAndQueries:
    def test_index_reports_count(self, invoke: Invoke, notes: Path):
        result = invoke("x")
        assert result.exit_code == 0
        assert "indexed 3 note(s)" in result.output

    def test_search_by_title(self, invoke: Invoke, notes: Path):
        result = invoke("search", "ALP")
        assert result.exit_code == 0
        assert "alpha" in result.output
        assert "beta" not in result.output

    def test_search_by_tags(self, invoke: Invoke, notes: Path):
        result = invoke("s", "-t", "work", "-t", "urgent")
        assert result.exit_code == 0
        assert "alpha" in result.output and "beta" in result.output
        assert "gamma" not in result.output

    def test_search_all_tags(self, invoke: Invoke, notes: Path):
        result = invoke("s", "-t", "work", "-t", "urgent", "--all")
        assert result.exit_code == 0
        assert "alpha" in result.output
        assert "beta" not in result.output

    def test_tags_listing(self, invoke: Invoke, notes: Path):
        result = invoke("tags")
        assert result.exit_code == 0
        assert "urgent" in result.output
        popular = invoke("ts", "popular", "-n", "1")
        assert popular.exit_code == 0
        assert "work" in popular.output
        assert "urgent" not in popular.output

    def test_info(self, invoke: Invoke, notes: Path):
        result = invoke("info", "ALPHA")
        assert result.exit_code == 0
        assert "work, urgent" in result.output

    def test_recent(self, invoke: Invoke, notes: Path):
        result = invoke("recent", "-n", "0")
        assert result.exit_code == 0
        for title in ("alpha", "beta", "gamma"):
            assert title in result.output

    def test_date_rejects_bad_specifier(self, invoke: Invoke, notes: Path):
        result = invoke("date", "24x")
        assert result.exit_code == 1
        assert "invalid date specifier" in result.output

    def test_config(self, invoke: Invoke, cli_store: Repositories):
        result = invoke("config")
        assert result.exit_code == 0
        assert "note_dir" in result.output


class TestMutations:
    def test_open_creates_note(self, invoke: Invoke, cli_store: Repositories):
        result = invoke("open", "fresh")
        assert result.exit_code == 0, result.output
        assert (cli_store.note_dir / "fresh.md").is_file()
        assert cli_store.index.load()["fresh"]["last_visited"] is not None

    def test_open_reserved_word_fails(self, invoke: Invoke, cli_store: Repositories):
        result = invoke("o", "pin")
        assert result.exit_code == 1
        assert "reserved" in result.output

    def test_pin_cycle(self, invoke: Invoke, notes: Path, cli_store: Repositories):
        assert invoke("pin", "alpha").exit_code == 0
        assert "already pinned" in invoke("p", "alpha").output
        assert "alpha" in invoke("pinned").output
        assert invoke("unpin", "alpha").exit_code == 0
        assert cli_store.pins.load() == set()

    def test_pin_unknown_fails(self, invoke: Invoke, notes: Path):
        result = invoke("pin", "nothing")
        assert result.exit_code == 1
        assert "note not found" in result.output

    def test_rename_and_tag(self, invoke: Invoke, notes: Path, cli_store: Repositories):
        assert invoke("mv", "gamma", "delta").exit_code == 0
        assert invoke("tag", "delta", "-t", "new").exit_code == 0
        assert cli_store.index.load()["delta"]["tags"] == ["new"]

    def test_delete_recover_and_empty(
        self, invoke: Invoke, notes: Path, cli_store: Repositories
    ):
        assert invoke("delete", "beta").exit_code == 0
        assert "beta" in invoke("trash").output
        assert "beta" in invoke("trash", "search", "BE").output
        assert invoke("recover", "beta").exit_code == 0
        assert "beta" in cli_store.index.load()

        assert invoke("d", "beta").exit_code == 0
        result = invoke("trash", "empty", "--yes")
        assert result.exit_code == 0
        assert "deleted 1 file(s)" in result.output

    def test_empty_trash_asks_first(self, invoke: Invoke, notes: Path):
        invoke("delete", "beta")
        result = invoke("trash", "empty", input="n\n")
        assert result.exit_code == 1
        assert "beta" in invoke("trash", "list").output

    def test_templates(self, invoke: Invoke, cli_store: Repositories):
        cli_store.templates.save_template("meeting", ".meeting\n")
        assert "meeting" in invoke("template", "list").output
        result = invoke("open", "standup", "-T", "meeting")
        assert result.exit_code == 0, result.output
        assert cli_store.index.load()["standup"]["tags"] == ["meeting"]
        assert invoke("template", "rename", "meeting", "sync").exit_code == 0
        assert invoke("template", "delete", "sync").exit_code == 0
        assert invoke("template", "delete", "sync").exit_code == 1


class TestAliases:
    def test_every_alias_maps_to_its_command(self):
        group = typer.main.get_command(app)
        aliases = group.aliases()
        assert aliases["mv"] == "rename, mv"
        assert aliases["rename"] == "rename, mv"
        assert aliases["pd"] == "pinned, pd"
        assert "popular" not in aliases

    def test_alias_and_full_name_run_the_same_command(
        self, invoke: Invoke, notes: Path
    ):
        invoke("pin", "beta")
        assert invoke("pinned").output == invoke("pd").output

    def test_unknown_command_fails(self, invoke: Invoke):
        assert invoke("nonsense").exit_code != 0
