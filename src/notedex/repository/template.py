# SPDX-License-Identifier: MIT

from pathlib import Path

from notedex.configuration import Store
from notedex.errors import ErrorCode, NoteConflictError, NoteNotFoundError, StorageError


class TemplateRepository:
    """Reusable note bodies stored as ``<store>/templates/<name>.md``."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def template_path(self, name: str) -> Path:
        return self.store.templates_path / f"{name}.md"

    def template_exists(self, name: str) -> bool:
        return self.template_path(name).is_file()

    def list_templates(self) -> list[str]:
        if not self.store.templates_path.is_dir():
            return []
        return sorted(
            entry.stem
            for entry in self.store.templates_path.iterdir()
            if entry.is_file() and entry.suffix == ".md"
        )

    def load_template(self, name: str) -> str:
        path = self.template_path(name)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NoteNotFoundError(
                name,
                f"template not found: {name}",
                ErrorCode.TEMPLATE_NOT_FOUND,
            ) from e
        except OSError as e:
            raise StorageError(
                "read template", str(path), e, ErrorCode.STORAGE_READ_FAILED
            ) from e

    def ensure_template(self, name: str) -> Path:
        """Create an empty template file if missing and return its path."""
        path = self.template_path(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as e:
            raise StorageError("create template", str(path), e) from e
        return path

    def save_template(self, name: str, content: str) -> None:
        path = self.template_path(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageError("write template", str(path), e) from e

    def delete_template(self, name: str) -> None:
        path = self.template_path(name)
        if not path.is_file():
            raise NoteNotFoundError(
                name, f"template not found: {name}", ErrorCode.TEMPLATE_NOT_FOUND
            )
        try:
            path.unlink()
        except OSError as e:
            raise StorageError(
                "delete template", str(path), e, ErrorCode.STORAGE_DELETE_FAILED
            ) from e

    def rename_template(self, old_name: str, new_name: str) -> None:
        old_path = self.template_path(old_name)
        new_path = self.template_path(new_name)
        if not old_path.is_file():
            raise NoteNotFoundError(
                old_name,
                f"template not found: {old_name}",
                ErrorCode.TEMPLATE_NOT_FOUND,
            )
        if new_path.exists():
            raise NoteConflictError(
                new_name,
                f"template already exists: {new_name}",
                ErrorCode.TEMPLATE_ALREADY_EXISTS,
            )
        try:
            old_path.rename(new_path)
        except OSError as e:
            raise StorageError(
                "rename template", str(old_path), e, ErrorCode.STORAGE_MOVE_FAILED
            ) from e
