"""
foldershield/fs.py
──────────────────
Hide / unhide a single directory.

✓ Windows: sets or clears the hidden + system attributes   (attrib +h +s / -h -s)
✓ Linux, macOS & other POSIX: renames folder → dot-prefixed   (.foo)   and back

Features
--------
• controller.hide(path)       – hide the folder, returns an Outcome
• controller.unhide(path)     – reveal the folder, returns an Outcome
• controller.is_hidden(path)  – best-effort check
• select_controller(settings) – pick the variant once at startup

Failures are raised as FolderShieldError subclasses so the shell can
surface them nicely. Nothing here prints.
"""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .config import Settings
from .errors import AlreadyExists, DirectoryNotFound, InvalidState, IOFailure
from .log import get_logger

log = get_logger("fs")

# --------------------------------------------------------------------------- #
# Outcome & path helpers
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Outcome:
    """Result of one successful hide/unhide call."""

    op: str  # 'hide' or 'unhide'
    source: Path
    path: Path  # where the directory lives afterwards
    changed: bool
    message: str


def resolve_path(path: str | os.PathLike[str]) -> Path:
    """
    Return *path* as an absolute, normalised Path.

    Symlinks are left alone. Raises ValueError for an empty string.
    """
    raw = os.fspath(path)
    if not raw.strip():
        raise ValueError("Path cannot be empty.")
    return Path(os.path.abspath(raw))


def _dir_exists(path: Path) -> bool:
    # os.path.isdir swallows OSError (ENAMETOOLONG, EACCES, ...) and reports False
    return os.path.isdir(path)


def _require_dir(path: str | os.PathLike[str]) -> Path:
    p = resolve_path(path)
    if not _dir_exists(p):
        raise DirectoryNotFound(f"The directory '{p}' does not exist.", p)
    return p


# --------------------------------------------------------------------------- #
# Controller interface
# --------------------------------------------------------------------------- #


class HiddenStateController(ABC):
    """One way of hiding a directory. Pick one with select_controller()."""

    name: str = ""

    @abstractmethod
    def hide(self, path: str | os.PathLike[str]) -> Outcome:
        """Hide *path*."""

    @abstractmethod
    def unhide(self, path: str | os.PathLike[str]) -> Outcome:
        """Reveal *path*."""

    @abstractmethod
    def is_hidden(self, path: str | os.PathLike[str]) -> bool:
        """Whether *path* counts as hidden under this controller."""


# --------------------------------------------------------------------------- #
# Windows: hidden + system attributes
# --------------------------------------------------------------------------- #


class AttributeController(HiddenStateController):
    """
    Toggles the hidden and system attributes with ``attrib``.

    Both flags are always set or cleared together; re-applying a flag that
    is already in place is a no-op, so both operations are idempotent.
    """

    name = "attributes"

    def hide(self, path: str | os.PathLike[str]) -> Outcome:
        p = _require_dir(path)
        log.debug("hide %s via attributes", p)
        _run(["attrib", "+h", "+s", str(p)])
        return Outcome(
            op="hide",
            source=p,
            path=p,
            changed=True,
            message=f"Successfully hid '{p}'. It may not be visible in Explorer.",
        )

    def unhide(self, path: str | os.PathLike[str]) -> Outcome:
        p = _require_dir(path)
        log.debug("unhide %s via attributes", p)
        _run(["attrib", "-h", "-s", str(p)])
        return Outcome(
            op="unhide",
            source=p,
            path=p,
            changed=True,
            message=f"Successfully unhid '{p}'. It should now be visible in Explorer.",
        )

    def is_hidden(self, path: str | os.PathLike[str]) -> bool:
        p = _require_dir(path)
        stdout = _run(["attrib", str(p)])
        # attrib prints the flag columns first, then the path
        flags = stdout.upper().split(str(p).upper())[0]
        return "H" in flags


# --------------------------------------------------------------------------- #
# POSIX: leading-dot rename
# --------------------------------------------------------------------------- #


class RenameController(HiddenStateController):
    """
    Portable solution: rename folder → .name  (hide)  or strip dots (unhide).

    Hide adds exactly one dot; unhide strips *every* leading dot, so
    ``..double`` comes back as ``double``.
    """

    name = "rename"

    def hide(self, path: str | os.PathLike[str]) -> Outcome:
        p = _require_dir(path)
        if p.name.startswith("."):
            return Outcome(
                op="hide",
                source=p,
                path=p,
                changed=False,
                message=f"'{p}' is already hidden (starts with a dot). No changes made.",
            )
        if not p.name:
            # filesystem root: the dotted sibling is the root itself
            dotted = os.path.join(p, ".")
            raise AlreadyExists(f"Cannot hide '{p}' because '{dotted}' already exists.", p)
        target = p.with_name(f".{p.name}")
        if _dir_exists(target):
            raise AlreadyExists(f"Cannot hide '{p}' because '{target}' already exists.", p)
        log.debug("hide %s -> %s", p, target)
        _rename(p, target)
        return Outcome(
            op="hide",
            source=p,
            path=target,
            changed=True,
            message=f"Successfully hid '{p}'. New path is '{target}'.",
        )

    def unhide(self, path: str | os.PathLike[str]) -> Outcome:
        p = _require_dir(path)
        if not p.name.startswith("."):
            raise InvalidState(
                f"'{p.name}' does not begin with a dot and is therefore "
                "not considered hidden on UNIX systems.",
                p,
            )
        target = p.parent / p.name.lstrip(".")
        if _dir_exists(target):
            raise AlreadyExists(f"Cannot unhide '{p}' because '{target}' already exists.", p)
        log.debug("unhide %s -> %s", p, target)
        _rename(p, target)
        return Outcome(
            op="unhide",
            source=p,
            path=target,
            changed=True,
            message=f"Successfully unhid '{p}'. New path is '{target}'.",
        )

    def is_hidden(self, path: str | os.PathLike[str]) -> bool:
        return _require_dir(path).name.startswith(".")


# --------------------------------------------------------------------------- #
# Selection
# --------------------------------------------------------------------------- #


def select_controller(settings: Settings) -> HiddenStateController:
    """Return the controller for the strategy probed into *settings*."""
    if settings.strategy == AttributeController.name:
        return AttributeController()
    return RenameController()


# --------------------------------------------------------------------------- #
# Utility
# --------------------------------------------------------------------------- #


def _run(cmd: List[str]) -> str:
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        log.warning("%s failed: %s", " ".join(cmd), exc)
        raise IOFailure(f"'{' '.join(cmd)}' failed: {exc}", Path(cmd[-1])) from exc
    return result.stdout


def _rename(src: Path, dst: Path) -> None:
    try:
        src.rename(dst)
    except OSError as exc:
        log.warning("rename %s -> %s failed: %s", src, dst, exc)
        raise IOFailure(f"Could not rename '{src}' to '{dst}': {exc.strerror or exc}", src) from exc
