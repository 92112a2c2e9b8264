# SPDX-License-Identifier: MIT

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Callable

from notedex.errors import EditorError

logger = logging.getLogger(__name__)


def open_in_editor(editor: str, path: Path) -> None:
    """
    Run the editor on a file and wait for it to exit.

    The editor setting may carry arguments, e.g. ``code --wait``.
    """
    if editor.strip() == "":
        raise EditorError(editor, str(path), "no editor configured")
    command = shlex.split(editor) + [str(path)]
    logger.debug("running editor: %s", command)
    try:
        subprocess.run(command, check=True)
    except FileNotFoundError as e:
        raise EditorError(editor, str(path), "command not found") from e
    except subprocess.CalledProcessError as e:
        raise EditorError(editor, str(path), f"exit status {e.returncode}") from e


def editor_launcher(editor: str) -> Callable[[Path], None]:
    def launch(path: Path) -> None:
        open_in_editor(editor, path)

    return launch
