"""Package-scoped logging for FolderShield."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "foldershield"

_setup_done = False


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``foldershield`` logger (idempotent).

    Attaches a single ``RichHandler`` on stderr at WARNING, or DEBUG when
    *verbose* is True. ``propagate`` is switched off so records never reach
    the root logger.
    """
    global _setup_done
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if _setup_done:
        return
    handler = RichHandler(
        console=Console(stderr=True, highlight=False),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(f"foldershield.{name}")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
