"""
foldershield package initializer
────────────────────────────────
• Exposes public API shortcuts
• Provides a version helper
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from .errors import (
    AlreadyExists,
    DirectoryNotFound,
    ErrorKind,
    FolderShieldError,
    InvalidState,
    IOFailure,
)
from .fs import (
    AttributeController,
    HiddenStateController,
    Outcome,
    RenameController,
    resolve_path,
    select_controller,
)

try:
    # When installed with pip this is the canonical version
    __version__: str = _pkg_version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Editable checkout or unknown state
    __version__ = "0.0.0.dev0"


def get_version() -> str:
    """Return the current FolderShield version string."""
    return __version__


__all__ = [
    "HiddenStateController",
    "AttributeController",
    "RenameController",
    "Outcome",
    "select_controller",
    "resolve_path",
    "ErrorKind",
    "FolderShieldError",
    "DirectoryNotFound",
    "AlreadyExists",
    "InvalidState",
    "IOFailure",
    "get_version",
    "__version__",
]
