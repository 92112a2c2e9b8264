from pathlib import Path

import pytest

from notedex.configuration import Store
from notedex.repository.repositories import Repositories


@pytest.fixture()
def store(tmp_path: Path) -> Store:
    return Store(tmp_path / "store")


@pytest.fixture()
def repos(store: Store, tmp_path: Path) -> Repositories:
    """An initialized store whose note directory lives under tmp_path."""
    repos = Repositories(store)
    repos.config.update_config(note_dir=str(tmp_path / "notes"), editor="true")
    repos.initialize()
    return repos


@pytest.fixture()
def note_dir(repos: Repositories) -> Path:
    return repos.note_dir.resolve()
