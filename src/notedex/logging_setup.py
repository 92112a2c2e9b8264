# SPDX-License-Identifier: MIT

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from notedex.configuration import APP_NAME, LOG_PATH


def setup_logging(level: str = "INFO", log_dir: Path = LOG_PATH) -> logging.Logger:
    """
    Attach a rotating file handler and a stderr rich handler to the package logger.

    Called once by the CLI entry point; library modules only ever call
    ``logging.getLogger(__name__)``.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.handlers:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{APP_NAME}.log"

    file_handler = RotatingFileHandler(
        log_file, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    file_handler.setLevel(logging.getLevelNamesMapping().get(level, logging.INFO))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )

    console_handler = RichHandler(
        console=Console(stderr=True), show_time=False, show_path=False
    )
    console_handler.setLevel(logging.WARNING)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.debug("logging initialized, log_file=%s", log_file)
    return logger
