# SPDX-License-Identifier: MIT

"""Exceptions raised by the notedex services.

Every failure a caller can act on maps to one subclass of NotedexError.
The terminal layer is the only place these are caught and rendered.
"""

from enum import Enum
from typing import Any, Optional, Union


class ErrorCode(Enum):
    # Lookups (1xxx)
    NOTE_NOT_FOUND = 1001
    TRASHED_NOTE_NOT_FOUND = 1002
    TEMPLATE_NOT_FOUND = 1003

    # Conflicts (2xxx)
    NOTE_ALREADY_EXISTS = 2001
    TEMPLATE_ALREADY_EXISTS = 2002

    # Input (3xxx)
    INVALID_NOTE_NAME = 3001
    RESERVED_NOTE_NAME = 3002
    PATH_ESCAPES_NOTE_DIR = 3003
    INVALID_DATE_SPECIFIER = 3004
    INVALID_TAGS = 3005

    # Persisted state (4xxx)
    CORRUPT_TAGS = 4001
    CORRUPT_INDEX = 4002

    # Filesystem (5xxx)
    STORAGE_READ_FAILED = 5001
    STORAGE_WRITE_FAILED = 5002
    STORAGE_MOVE_FAILED = 5003
    STORAGE_DELETE_FAILED = 5004
    EDITOR_FAILED = 5005


class NotedexError(Exception):
    """Base exception for all notedex errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "code": self.code.value,
            "code_name": self.code.name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class NoteNotFoundError(NotedexError):
    """Raised when a title is absent from the index, the trash or the templates."""

    def __init__(
        self,
        title: str,
        message: Optional[str] = None,
        code: ErrorCode = ErrorCode.NOTE_NOT_FOUND,
    ) -> None:
        super().__init__(
            message or f"note not found: {title}",
            code=code,
            details={"title": title},
        )
        self.title = title


class NoteConflictError(NotedexError):
    """Raised when a destination name is already taken."""

    def __init__(
        self,
        title: str,
        message: Optional[str] = None,
        code: ErrorCode = ErrorCode.NOTE_ALREADY_EXISTS,
    ) -> None:
        super().__init__(
            message or f"a note with this name already exists: {title}",
            code=code,
            details={"title": title},
        )
        self.title = title


class InvalidInputError(NotedexError):
    """Raised before any persisted state is touched."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        value: Optional[Any] = None,
    ) -> None:
        details = {} if value is None else {"value": value}
        super().__init__(message, code=code, details=details)
        self.value = value


class CorruptStateError(NotedexError):
    """Raised when a persisted document cannot be parsed and cannot be degraded."""

    def __init__(self, path: str, message: str, code: ErrorCode) -> None:
        super().__init__(message, code=code, details={"path": path})
        self.path = path


class StorageError(NotedexError):
    """Raised when the filesystem fails mid-operation. The original error is chained."""

    def __init__(
        self,
        operation: str,
        path: str,
        error: Union[OSError, UnicodeDecodeError],
        code: ErrorCode = ErrorCode.STORAGE_WRITE_FAILED,
    ) -> None:
        reason = getattr(error, "strerror", None) or error
        super().__init__(
            f"{operation} failed for {path}: {reason}",
            code=code,
            details={"operation": operation, "path": path},
        )
        self.operation = operation
        self.path = path


class EditorError(NotedexError):
    """Raised when the editor cannot be started or exits with a failure status."""

    def __init__(self, editor: str, path: str, reason: str) -> None:
        super().__init__(
            f"editor {editor!r} failed on {path}: {reason}",
            code=ErrorCode.EDITOR_FAILED,
            details={"editor": editor, "path": path},
        )
        self.editor = editor
        self.path = path
