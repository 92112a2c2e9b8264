# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Callable

from notedex.repository.repositories import Repositories
from notedex.service.note_store import validate_note_name

logger = logging.getLogger(__name__)


def edit_template(
    repos: Repositories, name: str, open_in_editor: Callable[[Path], None]
) -> Path:
    """Open a template in the editor, creating it empty if it does not exist yet."""
    validate_note_name(name)
    created = not repos.templates.template_exists(name)
    path = repos.templates.ensure_template(name)
    if created:
        logger.info("created template %s", name)
    open_in_editor(path)
    return path


def delete_template(repos: Repositories, name: str) -> None:
    validate_note_name(name)
    repos.templates.delete_template(name)
    logger.info("deleted template %s", name)


def rename_template(repos: Repositories, old_name: str, new_name: str) -> None:
    validate_note_name(old_name)
    validate_note_name(new_name)
    repos.templates.rename_template(old_name, new_name)
    logger.info("renamed template %s to %s", old_name, new_name)
