"""Clack-style confirmation prompt using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

_console = Console()


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    if not sys.stdout.isatty():
        return
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _confirm(question: str, default: bool = False) -> bool:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    try:
        answer = input(suffix).strip().lower()
    except EOFError:
        answer = "n"

    result = default if answer == "" else answer in ("y", "yes")

    display = "Yes" if result else "No"

    # Overwrite the ◆ question + │ bar + │ [y/N] input line
    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return result


def prompt_overwrite(target: str) -> bool:
    """Ask whether an existing file or directory may be overwritten."""
    return _confirm(f"{escape(target)} already exists. Overwrite?", default=False)
