"""Where command implementation.

Shows which trash directory would receive each path.
"""

from typing import Annotated

import typer

from filediscard.cli.types import get_cli_discarder
from filediscard.utils.formatting import console, create_trash_table, print_error


def where_command(
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths to look up."),
    ],
) -> None:
    """Show the trash directory for each of PATHS."""
    discarder = get_cli_discarder()
    table = create_trash_table()

    for path in paths:
        try:
            trash = discarder.trash_for(path)
        except OSError as e:
            print_error(f"cannot resolve '{path}': {e}")
            raise typer.Exit(code=1) from e
        exists = "[success]yes[/]" if trash.is_dir() else "[warning]no[/]"
        table.add_row(path, str(trash), exists)

    console.print(table)
