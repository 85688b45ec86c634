"""Shared utilities for the Ejectd CLI: menu input parsing and console helpers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import typer
from rich.console import Console

# Reads one line after showing a prompt; returns None at end of input
ReadLine = Callable[[str], Optional[str]]


class MenuAction(Enum):
    """What the operator asked for at the menu prompt."""
    QUIT = "quit"
    REFRESH = "refresh"
    SELECT = "select"
    INVALID = "invalid"


@dataclass(frozen=True)
class Choice:
    action: MenuAction
    index: Optional[int] = None  # 0-based, only for SELECT


def parse_choice(raw: str, count: int) -> Choice:
    """Interpret one line of menu input against a catalog of ``count`` drives.

    Args:
        raw: Line as typed (case and surrounding whitespace are ignored)
        count: Number of drives currently listed

    Returns:
        Choice; anything that is not q, r or a number in 1..count is INVALID
    """
    text = raw.strip().lower()

    if text == "q":
        return Choice(MenuAction.QUIT)
    if text == "r":
        return Choice(MenuAction.REFRESH)

    if text.isascii() and text.isdigit():
        number = int(text)
        if 1 <= number <= count:
            return Choice(MenuAction.SELECT, index=number - 1)

    return Choice(MenuAction.INVALID)


def console_reader(console: Console) -> ReadLine:
    """Build a ReadLine that prompts through ``console`` and maps EOF to None."""
    def read(prompt: str) -> Optional[str]:
        try:
            return console.input(prompt)
        except EOFError:
            return None
    return read


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_error(console: Console, message: str, prefix: str = "❌") -> None:
    console.print(f"[red]{prefix}[/red] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠️ ") -> None:
    console.print(f"[yellow]{prefix}[/yellow] {message}")
