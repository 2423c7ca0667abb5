"""Output formatters for kubectx-cli."""

from __future__ import annotations

from collections.abc import Iterable

from rich.markup import escape
from rich.text import Text

from kubectx_cli.utils.ui.console import get_console

console = get_console()
err_console = get_console(stderr=True)


def format_selection_list(
    names: Iterable[str],
    current: str | None,
    *,
    style: str = "bold yellow",
    color: bool = True,
) -> None:
    """Print one selection per line, styling the active one."""
    for name in names:
        if color and name == current:
            console.print(Text(name, style=style), soft_wrap=True)
        else:
            console.print(Text(name), soft_wrap=True)


def format_plain(message: str) -> None:
    """Print a bare value (e.g. the current selection) with no decoration."""
    console.print(Text(message), soft_wrap=True)


def format_error(message: str) -> None:
    """Format and display an error message."""
    err_console.print(f"[bold red]error:[/bold red] {escape(message)}", soft_wrap=True)


def format_success(message: str) -> None:
    """Format and display a success message."""
    err_console.print(f"[bold green]✔[/bold green] {escape(message)}", soft_wrap=True)


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    err_console.print(f"[bold yellow]warning:[/bold yellow] {escape(message)}", soft_wrap=True)


def format_info(message: str) -> None:
    """Format and display an info message."""
    err_console.print(escape(message), soft_wrap=True)
