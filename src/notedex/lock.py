# SPDX-License-Identifier: MIT

"""Advisory cross-process lock guarding a store resource file."""

import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl

logger = logging.getLogger(__name__)


def lock_path_for(resource: Path) -> Path:
    return resource.with_name(resource.name + ".lock")


def _acquire(handle: IO[bytes]) -> None:
    if sys.platform == "win32":
        # LK_LOCK retries for ten seconds before raising; keep blocking.
        handle.seek(0)
        while True:
            try:
                msvcrt.locking(handle.fileno(), msvcrt.LK_LOCK, 1)
                return
            except OSError:
                continue
    else:
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX)


def _release(handle: IO[bytes]) -> None:
    if sys.platform == "win32":
        handle.seek(0)
        msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)
    else:
        fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


@contextmanager
def file_lock(resource: Path) -> Iterator[Path]:
    """
    Hold an exclusive lock on ``<resource>.lock`` for the duration of the block.

    Blocks until the lock is free; there is no timeout. The lock is released
    on every exit path, including exceptions raised inside the block. Only
    processes that also take this lock are excluded.

    Yields:
        The path of the lock sentinel file
    """
    lock_path = lock_path_for(resource)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    with open(lock_path, "a+b") as handle:
        logger.debug("waiting for lock %s (pid %d)", lock_path, os.getpid())
        _acquire(handle)
        logger.debug("acquired lock %s", lock_path)
        try:
            yield lock_path
        finally:
            _release(handle)
            logger.debug("released lock %s", lock_path)
