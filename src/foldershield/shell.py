"""
foldershield/shell.py
─────────────────────
Interactive Rich menu: hide, unhide, exit.

The controller is chosen by the caller; the shell only reads input,
dispatches and reports. Every FolderShieldError is caught here so no
failed operation ends the session.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .errors import ErrorKind, FolderShieldError
from .fs import HiddenStateController
from .log import get_logger

log = get_logger("shell")

_ERROR_HEADINGS = {
    ErrorKind.DIRECTORY_NOT_FOUND: "not found",
    ErrorKind.ALREADY_EXISTS: "name taken",
    ErrorKind.INVALID_STATE: "not hidden",
    ErrorKind.IO_FAILURE: "I/O failure",
}


def _ask(console: Console, prompt: str) -> Optional[str]:
    """Read one stripped line; None once stdin is exhausted."""
    try:
        return Prompt.ask(prompt, console=console).strip()
    except EOFError:
        console.print()
        return None


def _print_menu(console: Console) -> None:
    table = Table(show_header=False, box=None)
    table.add_row("[1]", "Hide folder")
    table.add_row("[2]", "Unhide folder")
    table.add_row("[3]", "Exit")
    console.print()
    console.print("Choose an option:")
    console.print(table)


def run_shell(controller: HiddenStateController, console: Optional[Console] = None) -> None:
    """Loop until the user picks Exit (or stdin closes)."""
    console = console or Console(highlight=False, soft_wrap=True)
    console.print(Panel.fit("[bold cyan]FolderShield[/]"))
    console.print("This tool hides or unhides folders across Windows and UNIX platforms.")
    log.debug("using %s controller", controller.name)

    while True:
        _print_menu(console)
        choice = _ask(console, "Enter your choice [1-3]")
        if choice is None or choice == "3":
            console.print("Exiting. Goodbye!")
            return
        if choice not in ("1", "2"):
            console.print("[yellow]Invalid selection. Please enter 1, 2, or 3.[/]")
            continue

        path = _ask(console, "Enter the full path of the folder")
        if not path:
            console.print("[yellow]Path cannot be empty. Please try again.[/]")
            continue

        operation = controller.hide if choice == "1" else controller.unhide
        try:
            outcome = operation(path)
        except FolderShieldError as exc:
            heading = _ERROR_HEADINGS.get(exc.kind, "error")
            console.print(f"[red]Error ({heading}):[/] {escape(exc.message)}")
            continue
        style = "green" if outcome.changed else "yellow"
        console.print(f"[{style}]{escape(outcome.message)}[/]")
