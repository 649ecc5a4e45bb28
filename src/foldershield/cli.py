"""
foldershield/cli.py
───────────────────
FolderShield – interactive hide / unhide of a single folder, powered by Typer.

Usage
-----
$ foldershield              # open interactive menu
$ foldershield --verbose    # same, with debug logging on stderr
$ foldershield --version
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from . import get_version
from .config import Settings
from .fs import select_controller
from .log import setup_logging
from .shell import run_shell

# --------------------------------------------------------------------------- #
# Typer app set-up
# --------------------------------------------------------------------------- #

app = typer.Typer(
    help="FolderShield – hide or unhide a folder (interactive).",
    add_completion=False,
)

console = Console(highlight=False, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"foldershield {get_version()}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def _entrypoint(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    Pick the hide strategy for this platform once, then drop into the
    interactive Rich menu.
    """
    if ctx.invoked_subcommand is not None:
        return
    settings = Settings(verbose=verbose)
    setup_logging(settings.verbose)
    run_shell(select_controller(settings), console)


# --------------------------------------------------------------------------- #
# Entrypoint
# --------------------------------------------------------------------------- #


def run() -> None:  # console-script entry point
    app()


if __name__ == "__main__":
    run()
