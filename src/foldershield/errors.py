"""
foldershield/errors.py
──────────────────────
Error kinds raised by the hide / unhide operations.

Every failure carries an ``ErrorKind`` so the shell can pick its message
heading by kind instead of by exception type.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(str, Enum):
    DIRECTORY_NOT_FOUND = "directory-not-found"
    ALREADY_EXISTS = "already-exists"
    INVALID_STATE = "invalid-state"
    IO_FAILURE = "io-failure"


class FolderShieldError(Exception):
    """Base class for every failure an operation can report."""

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class DirectoryNotFound(FolderShieldError):
    """Nothing is at the path, or it is not a directory."""

    kind = ErrorKind.DIRECTORY_NOT_FOUND


class AlreadyExists(FolderShieldError):
    """The hidden / unhidden name is already taken by another directory."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidState(FolderShieldError):
    """The directory is not in a state the operation can act on."""

    kind = ErrorKind.INVALID_STATE


class IOFailure(FolderShieldError):
    """The OS refused the rename or attribute change."""

    kind = ErrorKind.IO_FAILURE


__all__ = [
    "ErrorKind",
    "FolderShieldError",
    "DirectoryNotFound",
    "AlreadyExists",
    "InvalidState",
    "IOFailure",
]
