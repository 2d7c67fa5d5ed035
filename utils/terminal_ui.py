"""Terminal output helpers built on Rich.

Generated content itself never goes through these helpers; dry-run output is
written verbatim by the Writer.
"""

from typing import Iterable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from config import Config
from utils.theme import get_theme

console = Console()
err_console = Console(stderr=True)


def _get_colors():
    return get_theme(Config.THEME)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message in a panel on stderr.

    Args:
        message: Error message
        title: Panel title (default: "Error")
    """
    colors = _get_colors()
    err_console.print(
        Panel(
            escape(message),
            title=f"[bold {colors.error}]{title}[/bold {colors.error}]",
            border_style=colors.error,
            box=box.ROUNDED,
        )
    )


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message
    """
    colors = _get_colors()
    console.print(f"[{colors.success}]✓ {escape(message)}[/{colors.success}]")


def print_info(message: str) -> None:
    colors = _get_colors()
    console.print(f"[{colors.primary}]ℹ {escape(message)}[/{colors.primary}]")


def print_templates(title: str, rows: Iterable[tuple[str, str]]) -> None:
    """Print template names and descriptions as a table.

    Args:
        title: Table title, e.g. "Available skills"
        rows: (name, description) pairs
    """
    colors = _get_colors()
    table = Table(title=title, box=box.SIMPLE, border_style=colors.text_muted, padding=(0, 2))
    table.add_column("Name", style=f"{colors.primary} bold", no_wrap=True)
    table.add_column("Description", style=colors.secondary)

    for name, description in rows:
        table.add_row(escape(name), escape(description))

    console.print(table)
