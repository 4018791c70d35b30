"""Settings commands.

Show and initialize ~/.config/filediscard/config.toml.
"""

from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from filediscard.core.config import (
    DiscardSettings,
    SettingsError,
    load_settings_or_default,
    save_settings,
)
from filediscard.core.paths import get_settings_path
from filediscard.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show or initialize discard settings.",
    no_args_is_help=True,
)


class VariantOption(str, Enum):
    """Trash variant options for settings."""

    AUTO = "auto"
    MACOS = "macos"
    FREEDESKTOP = "freedesktop"


@app.command()
def show() -> None:
    """Show the effective settings."""
    path = get_settings_path()
    try:
        settings = load_settings_or_default(path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value).lower() if isinstance(value, bool) else str(value))

    console.print(table)
    source = str(path) if path.exists() else "defaults (no settings file)"
    console.print(f"[muted]Source: {escape(source)}[/muted]")


@app.command()
def init(
    create_trash: Annotated[
        bool,
        typer.Option(
            "--create-trash/--no-create-trash",
            help="Create missing trash directories on demand.",
        ),
    ] = False,
    variant: Annotated[
        VariantOption,
        typer.Option("--variant", help="Trash variant.", case_sensitive=False),
    ] = VariantOption.AUTO,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file."""
    path = get_settings_path()
    if path.exists() and not force:
        print_error(f"Settings already exist: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        settings = DiscardSettings(
            create_trash_when_missing=create_trash,
            variant=variant.value,
        )
        saved = save_settings(settings, path)
    except (ValueError, SettingsError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
