# SPDX-License-Identifier: MIT

import logging
import shutil
from pathlib import Path

from notedex import time
from notedex.configuration import Store
from notedex.errors import ErrorCode, StorageError

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


class TrashRepository:
    """
    The trash directory. Files keep their note filename, ``<title>.md``.

    When a file of the same name is already in the trash, the older one is
    moved aside to ``<title>~<YYMMDD.HHMMSS>.md`` (its modification time)
    so that nothing is overwritten.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    def trashed_path(self, title: str) -> Path:
        return self.store.trash_path / f"{title}{NOTE_SUFFIX}"

    def contains(self, title: str) -> bool:
        return self.trashed_path(title).is_file()

    def move_in(self, file_path: Path) -> Path:
        trash_dir = self.store.trash_path
        try:
            trash_dir.mkdir(parents=True, exist_ok=True)
            destination = trash_dir / file_path.name
            if destination.exists():
                self.__set_aside(destination)
            shutil.move(str(file_path), str(destination))
        except OSError as e:
            raise StorageError(
                "move to trash", str(file_path), e, ErrorCode.STORAGE_MOVE_FAILED
            ) from e
        logger.info("moved %s to trash", file_path)
        return destination

    def __set_aside(self, trashed: Path) -> Path:
        stamp = time.modified_stamp(trashed.stat())
        aside = trashed.with_name(f"{trashed.stem}~{stamp}{NOTE_SUFFIX}")
        counter = 2
        while aside.exists():
            aside = trashed.with_name(
                f"{trashed.stem}~{stamp}-{counter}{NOTE_SUFFIX}"
            )
            counter += 1
        trashed.rename(aside)
        logger.warning(
            "trash already held %s, kept the older copy as %s", trashed.name, aside.name
        )
        return aside

    def move_out(self, title: str, destination: Path) -> None:
        source = self.trashed_path(title)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(source), str(destination))
        except OSError as e:
            raise StorageError(
                "restore from trash", str(source), e, ErrorCode.STORAGE_MOVE_FAILED
            ) from e
        logger.info("restored %s to %s", source, destination)

    def list_titles(self) -> list[str]:
        try:
            entries = list(self.store.trash_path.iterdir())
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError(
                "list trash",
                str(self.store.trash_path),
                e,
                ErrorCode.STORAGE_READ_FAILED,
            ) from e
        return sorted(
            entry.stem
            for entry in entries
            if entry.is_file() and entry.suffix == NOTE_SUFFIX
        )

    def purge(self) -> int:
        try:
            entries = list(self.store.trash_path.iterdir())
        except FileNotFoundError:
            return 0
        except OSError as e:
            raise StorageError(
                "empty trash",
                str(self.store.trash_path),
                e,
                ErrorCode.STORAGE_READ_FAILED,
            ) from e

        count = 0
        for entry in entries:
            if not entry.is_file():
                continue
            try:
                entry.unlink()
            except OSError as e:
                raise StorageError(
                    "delete", str(entry), e, ErrorCode.STORAGE_DELETE_FAILED
                ) from e
            count += 1
        logger.info("permanently deleted %d file(s) from trash", count)
        return count
