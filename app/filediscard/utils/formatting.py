"""Rich console formatting utilities.

Provides consistent formatting for CLI output and verbose discard reports.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from filediscard.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_trash_table(title: str = "Trash Locations") -> Table:
    """Create a pre-configured table mapping paths to trash directories.

    Args:
        title: Table title.

    Returns:
        Rich Table with Path, Trash and Exists columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="source", no_wrap=True)
    table.add_column("Trash", style="destination", no_wrap=True)
    table.add_column("Exists", width=6, justify="center")
    return table


def report_operation(message: str) -> None:
    """Report a filesystem operation (verbose mode).

    The message is printed verbatim to stderr, like ``mv -v``/``rm -v``.
    """
    err_console.print(escape(message), highlight=False)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
