# SPDX-License-Identifier: MIT

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from notedex.errors import ErrorCode, StorageError


def read_json(path: Path) -> Any:
    """
    Parse a JSON document.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
        StorageError: For any other filesystem failure
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as e:
        raise StorageError("read", str(path), e, ErrorCode.STORAGE_READ_FAILED) from e
    except UnicodeDecodeError as e:
        raise json.JSONDecodeError(f"not UTF-8: {e.reason}", "", e.start) from e
    return json.loads(text)


def write_json(path: Path, data: Any) -> None:
    """Replace the whole document via a temporary file in the same directory."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
                tmp.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise StorageError("write", str(path), e) from e
